"""
Deployment/Service 스펙 모델

빌더가 만든 스펙은 변경 불가(frozen)이며, utils.k8s에서 kubernetes 클라이언트 오브젝트로 변환된다.
"""
from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class UpdateStrategy(str, Enum):
    """업데이트 전략"""
    ROLLING_ON_CHANGE = "RollingOnChange"  # 설정 변경 시 롤링 업데이트


class ContainerPort(BaseModel):
    """이름이 있는 컨테이너 포트"""
    model_config = ConfigDict(frozen=True)

    name: str
    container_port: int


class ContainerSpec(BaseModel):
    """컨테이너 스펙"""
    model_config = ConfigDict(frozen=True)

    name: str
    image: str
    command: Tuple[str, ...] = ()
    ports: Tuple[ContainerPort, ...] = ()


class WorkloadSpec(BaseModel):
    """Deployment 스펙 (master 또는 worker)"""
    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    replicas: int  # 빌더에서 검증하지 않음
    update_strategy: UpdateStrategy = UpdateStrategy.ROLLING_ON_CHANGE
    pod_selector: Dict[str, str]
    container: ContainerSpec
    labels: Dict[str, str] = Field(default_factory=dict, description="오브젝트 메타데이터 라벨")

    def find_port(self, name: str) -> Optional[int]:
        """이름으로 컨테이너 포트 번호 조회"""
        for port in self.container.ports:
            if port.name == name:
                return port.container_port
        return None


class ServicePort(BaseModel):
    """서비스 포트 (port == target_port)"""
    model_config = ConfigDict(frozen=True)

    port: int
    target_port: int


class ServiceSpec(BaseModel):
    """Service 스펙"""
    model_config = ConfigDict(frozen=True)

    name: str
    namespace: Optional[str] = None
    selector: Dict[str, str]
    labels: Dict[str, str] = Field(default_factory=dict)
    port: ServicePort


__all__ = [
    "UpdateStrategy",
    "ContainerPort",
    "ContainerSpec",
    "WorkloadSpec",
    "ServicePort",
    "ServiceSpec",
]
