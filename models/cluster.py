"""
Cluster related Pydantic models
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import SubmittedObject

# oshinko-cluster 라벨 값으로 쓰이므로 K8s 라벨 값 형식을 따른다
CLUSTER_NAME_PATTERN = r"^[A-Za-z0-9]([-A-Za-z0-9_.]*[A-Za-z0-9])?$"
CLUSTER_NAME_MAX_LENGTH = 63


class ClusterRequest(BaseModel):
    """클러스터 생성 요청 (NewCluster)"""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=CLUSTER_NAME_MAX_LENGTH,
        pattern=CLUSTER_NAME_PATTERN,
        description="클러스터 이름 (영숫자로 시작/끝, - _ . 허용, 최대 63자)",
    )
    worker_count: int = Field(..., ge=0, alias="workerCount", description="워커 수")
    # 현재는 무시됨 - 마스터는 항상 1개
    master_count: Optional[int] = Field(default=1, alias="masterCount", description="마스터 수 (현재 무시됨)")


class ClusterModel(BaseModel):
    """클러스터 정보"""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    worker_count: int = Field(..., alias="workerCount")
    master_count: Optional[int] = Field(default=1, alias="masterCount")


class SingleCluster(BaseModel):
    """단일 클러스터 응답"""
    cluster: ClusterModel


class ClusterCreated(BaseModel):
    """클러스터 생성 결과

    cluster는 실제 생성된 상태가 아닌 요청값을 그대로 반영한다.
    location은 워커가 접속하는 마스터 URL이다.
    """
    cluster: ClusterModel
    location: str
    objects: List[SubmittedObject] = []


__all__ = [
    "CLUSTER_NAME_PATTERN",
    "CLUSTER_NAME_MAX_LENGTH",
    "ClusterRequest",
    "ClusterModel",
    "SingleCluster",
    "ClusterCreated",
]
