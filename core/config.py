"""
Application configuration settings
"""
import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ConfigurationError

# 필수 환경변수
NAMESPACE_ENV = "OSHINKO_CLUSTER_NAMESPACE"
KUBE_CONFIG_ENV = "OSHINKO_KUBE_CONFIG"
IMAGE_ENV = "OSHINKO_CLUSTER_IMAGE"
# 선택 환경변수
SUBMIT_TIMEOUT_ENV = "OSHINKO_SUBMIT_TIMEOUT"

DEFAULT_SUBMIT_TIMEOUT = 30.0


class Settings:
    """Application settings"""

    # App
    APP_TITLE: str = "Oshinko Spark Cluster API"
    APP_VERSION: str = "0.1.0"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_CREDENTIALS: bool = True
    CORS_METHODS: List[str] = ["*"]
    CORS_HEADERS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


class ClusterConfig(BaseModel):
    """클러스터 생성에 필요한 설정 (요청마다 한 번 검증)"""
    model_config = ConfigDict(frozen=True)

    namespace: str = Field(..., min_length=1, description="오브젝트를 생성할 네임스페이스")
    kube_config: str = Field(..., min_length=1, description="kubeconfig 파일 경로")
    image: str = Field(..., min_length=1, description="master/worker 컨테이너 이미지")
    submit_timeout: float = Field(default=DEFAULT_SUBMIT_TIMEOUT, gt=0, description="K8s 요청 타임아웃 (초)")


def load_cluster_config(environ: Optional[Mapping[str, str]] = None) -> ClusterConfig:
    """환경변수에서 ClusterConfig 로드

    Raises:
        ConfigurationError: 필수 환경변수가 하나라도 없을 때 (누락된 이름을 모두 포함)
    """
    env = os.environ if environ is None else environ

    required = (NAMESPACE_ENV, KUBE_CONFIG_ENV, IMAGE_ENV)
    missing = [name for name in required if not env.get(name)]
    if missing:
        raise ConfigurationError(missing)

    timeout = env.get(SUBMIT_TIMEOUT_ENV)
    try:
        submit_timeout = float(timeout) if timeout else DEFAULT_SUBMIT_TIMEOUT
    except ValueError:
        submit_timeout = -1.0
    if submit_timeout <= 0:
        raise ConfigurationError(
            [SUBMIT_TIMEOUT_ENV], f"{SUBMIT_TIMEOUT_ENV} must be a positive number of seconds"
        )

    return ClusterConfig(
        namespace=env[NAMESPACE_ENV],
        kube_config=env[KUBE_CONFIG_ENV],
        image=env[IMAGE_ENV],
        submit_timeout=submit_timeout,
    )


settings = Settings()
