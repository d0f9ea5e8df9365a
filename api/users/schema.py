"""
    레거시 사용자 관련 Pydantic 스키마
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from users.deletion.result import DeletionPreview, DeletionSummary

# 레거시 사용자 조회 응답 스키마
class LegacyUserResponse(BaseModel):
    """레거시 사용자 상세"""

    codigo: int = Field(..., description="사용자 ID")
    nome: str = Field(..., description="사용자 이름")
    user: str = Field(..., description="로그인 ID")
    codigo_Tipo_Utilizador: Optional[int] = Field(None, description="사용자 유형 ID")
    estadoActual: Optional[str] = Field(None, description="상태")
    dataCadastro: Optional[datetime] = Field(None, description="등록일")
    loginStatus: Optional[str] = Field(None, description="로그인 상태")

    class Config:
        from_attributes = True


# 레거시 사용자 삭제 응답 스키마
class LegacyUserDeleteResponse(BaseModel):

    success: bool = Field(..., description="삭제 성공 여부")
    message: str = Field(..., description="응답 메시지")
    data: DeletionSummary = Field(..., description="테이블별 삭제 요약 (참고용)")


# 삭제 미리보기 응답 스키마
class LegacyUserDeletionPreviewResponse(BaseModel):

    success: bool = Field(..., description="조회 성공 여부")
    message: str = Field(..., description="응답 메시지")
    data: DeletionPreview = Field(..., description="테이블별 삭제 예정 행 수")


# 비활성화 응답 스키마
class LegacyUserDeactivateResponse(BaseModel):

    success: bool = Field(..., description="비활성화 성공 여부")
    message: str = Field(..., description="응답 메시지")
    data: LegacyUserResponse
