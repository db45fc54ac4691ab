"""
Clusters API Router
- Spark 클러스터 생성
- 조회/수정/삭제는 아직 미구현 (501)
"""
from fastapi import APIRouter, Depends, Response

from core.config import load_cluster_config
from core.exceptions import OperationNotImplemented
from models.cluster import ClusterRequest, SingleCluster
from models.errors import ErrorResponse
from services.cluster import ClusterOrchestrator

router = APIRouter(prefix="/api/clusters", tags=["clusters"])

_ERROR_RESPONSES = {
    422: {"model": ErrorResponse},
    501: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def get_orchestrator() -> ClusterOrchestrator:
    """요청마다 환경변수에서 설정을 읽어 오케스트레이터 생성"""
    return ClusterOrchestrator(load_cluster_config())


@router.post(
    "",
    status_code=201,
    response_model=SingleCluster,
    responses=_ERROR_RESPONSES,
)
def create_cluster(
    cluster: ClusterRequest,
    response: Response,
    orchestrator: ClusterOrchestrator = Depends(get_orchestrator),
):
    """Spark 클러스터 생성

    Location 헤더로 마스터 URL(spark://...)을 반환한다.
    요청 단위 취소는 연결하지 않는다 (cancel_event 없이 끝까지 제출).
    """
    created = orchestrator.create_cluster(cluster)
    response.headers["Location"] = created.location
    return SingleCluster(cluster=created.cluster)


@router.get("", responses=_ERROR_RESPONSES)
def find_clusters():
    """클러스터 목록 조회 (미구현)"""
    raise OperationNotImplemented("clusters.FindClusters")


@router.get("/{name}", responses=_ERROR_RESPONSES)
def find_single_cluster(name: str):
    """클러스터 조회 (미구현)"""
    raise OperationNotImplemented("clusters.FindSingleCluster")


@router.put("/{name}", responses=_ERROR_RESPONSES)
def update_single_cluster(name: str, cluster: ClusterRequest):
    """클러스터 수정 (미구현)"""
    raise OperationNotImplemented("clusters.UpdateSingleCluster")


@router.delete("/{name}", responses=_ERROR_RESPONSES)
def delete_single_cluster(name: str):
    """클러스터 삭제 (미구현)"""
    raise OperationNotImplemented("clusters.DeleteSingleCluster")
