"""
Health check API
"""
from fastapi import APIRouter

from core.config import load_cluster_config, settings
from core.kubernetes import get_k8s_clients

router = APIRouter(tags=["health"])


@router.get("/api/health")
async def health_check():
    """API 헬스체크"""
    return {"status": "healthy", "service": "oshinko-rest", "version": settings.APP_VERSION}


@router.get("/api/k8s/health")
def k8s_health_check():
    """Kubernetes 연결 헬스체크 (설정된 kubeconfig/네임스페이스 기준)"""
    try:
        cluster_config = load_cluster_config()
        core_v1, _ = get_k8s_clients(cluster_config.kube_config)
        core_v1.list_namespaced_service(cluster_config.namespace, limit=1)
        return {"status": "connected", "namespace": cluster_config.namespace}
    except Exception as e:
        return {"status": "disconnected", "error": str(e)}
