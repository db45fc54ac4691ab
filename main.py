"""
Oshinko Spark 클러스터 API

API 구조:
- /api/clusters/*    - Spark 클러스터 생성 (조회/수정/삭제는 미구현)
- /api/health        - API 헬스체크
- /api/k8s/health    - Kubernetes 연결 헬스체크
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import settings
from core.exceptions import ClusterError, ClusterValidationError
from routers import clusters_router, health_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_CREDENTIALS,
    allow_methods=settings.CORS_METHODS,
    allow_headers=settings.CORS_HEADERS,
)


@app.exception_handler(ClusterError)
async def cluster_error_handler(request: Request, exc: ClusterError):
    """ClusterError를 ErrorResponse JSON으로 변환"""
    if exc.status >= 500 and exc.status != 501:
        logger.error(f"{request.method} {request.url.path} failed: {exc.title}: {exc.details}")
    return JSONResponse(
        status_code=exc.status,
        content=exc.to_response().model_dump(mode="json"),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """요청 본문 검증 실패도 ErrorResponse 형식으로 반환"""
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return await cluster_error_handler(request, ClusterValidationError(details))


# ============================================
# 라우터 등록
# ============================================
app.include_router(clusters_router)
app.include_router(health_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
