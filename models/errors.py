"""
에러 응답 모델
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class CreationState(str, Enum):
    """클러스터 생성 결과 상태"""
    PARTIAL = "partially_created"  # 일부 오브젝트만 생성됨
    REJECTED = "rejected"  # 생성 시작 전 거부 (설정/클라이언트/검증 에러)


class SubmittedObject(BaseModel):
    """K8s에 제출된 오브젝트"""
    kind: str  # Deployment, Service
    name: str

    def __str__(self) -> str:
        return f"{self.kind}/{self.name}"


class ErrorModel(BaseModel):
    """단일 에러"""
    status: int
    title: str
    details: str


class ErrorResponse(BaseModel):
    """에러 응답"""
    errors: List[ErrorModel]
    state: CreationState = Field(default=CreationState.REJECTED, description="생성 결과 상태")
    created: List[str] = Field(default_factory=list, description="제출에 성공한 오브젝트 (제출 순서)")
    failed: Optional[str] = Field(None, description="제출에 실패한 오브젝트")
    retryable: bool = Field(default=False, description="타임아웃 등 재시도 가능한 실패 여부")


__all__ = [
    "CreationState",
    "SubmittedObject",
    "ErrorModel",
    "ErrorResponse",
]
