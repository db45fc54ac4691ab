"""
클러스터 생성 에러 분류

- ConfigurationError: 필수 환경변수 누락 (생성 전 거부)
- ClusterValidationError: 잘못된 요청 값 (생성 전 거부)
- ClientAcquisitionError: K8s 클라이언트 생성 실패 (생성 전 거부)
- SubmissionError: K8s 오브젝트 생성 실패 (부분 생성 가능)
- OperationNotImplemented: 아직 구현되지 않은 API
"""
from typing import List, Optional

from models.errors import CreationState, ErrorModel, ErrorResponse, SubmittedObject


class ClusterError(Exception):
    """클러스터 API 에러 기본 클래스"""

    status: int = 500
    title: str = "Cluster Error"

    def __init__(self, details: str):
        super().__init__(details)
        self.details = details

    @property
    def state(self) -> CreationState:
        return CreationState.REJECTED

    def to_response(self) -> ErrorResponse:
        """ErrorResponse 페이로드로 변환"""
        return ErrorResponse(
            errors=[ErrorModel(status=self.status, title=self.title, details=self.details)],
            state=self.state,
        )


class ConfigurationError(ClusterError):
    status = 503
    title = "Missing Env"

    def __init__(self, missing: List[str], details: Optional[str] = None):
        self.missing = list(missing)
        super().__init__(details or f"{', '.join(self.missing)} env vars must be set")


class ClusterValidationError(ClusterError):
    status = 422
    title = "Invalid Cluster"


class ClientAcquisitionError(ClusterError):
    status = 503
    title = "Cluster Client Unavailable"


class SubmissionError(ClusterError):
    """오브젝트 제출 실패

    제출 순서대로 성공한 오브젝트(created)와 실패한 오브젝트(failed)를 함께 보관한다.
    롤백은 하지 않으며 부분 생성 상태를 그대로 호출자에게 알린다.
    """

    status = 502
    title = "Cluster Creation Failed"

    def __init__(
        self,
        details: str,
        created: Optional[List[SubmittedObject]] = None,
        failed: Optional[SubmittedObject] = None,
        retryable: bool = False,
    ):
        super().__init__(details)
        self.created = list(created or [])
        self.failed = failed
        self.retryable = retryable

    @property
    def state(self) -> CreationState:
        # 제출 단계에 들어간 뒤의 실패는 created가 비어 있어도 부분 생성으로 본다
        return CreationState.PARTIAL

    def to_response(self) -> ErrorResponse:
        response = super().to_response()
        response.created = [str(obj) for obj in self.created]
        response.failed = str(self.failed) if self.failed else None
        response.retryable = self.retryable
        return response


class SubmissionCancelled(SubmissionError):
    title = "Cluster Creation Cancelled"


class OperationNotImplemented(ClusterError):
    status = 501
    title = "Not Implemented"

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"operation {operation} has not yet been implemented")


__all__ = [
    'ClusterError',
    'ConfigurationError',
    'ClusterValidationError',
    'ClientAcquisitionError',
    'SubmissionError',
    'SubmissionCancelled',
    'OperationNotImplemented',
]
