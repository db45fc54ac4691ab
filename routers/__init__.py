"""
API Routers

- clusters: Spark 클러스터 생성/조회/수정/삭제
- health  : API 및 Kubernetes 연결 헬스체크
"""
from .clusters import router as clusters_router
from .health import router as health_router

__all__ = [
    'clusters_router',
    'health_router',
]
