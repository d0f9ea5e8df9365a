"""
    레거시 사용자 조회/비활성화 엔드포인트
"""

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.session import get_db
from users.deletion import LegacyUserNotFound
from users.schema import LegacyUserResponse, LegacyUserDeactivateResponse
from users.services.user_service import get_legacy_user, deactivate_legacy_user

# 라우터 생성
read_router = APIRouter()

# 사용자 단건 조회 API
@read_router.get("/legacy/{user_id}", response_model=LegacyUserResponse)
def read_user(user_id: int, db: Session = Depends(get_db)):

    try:
        return LegacyUserResponse.model_validate(get_legacy_user(db, user_id))

    except LegacyUserNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)


# 사용자 비활성화 API
@read_router.patch("/legacy/{user_id}/deactivate", response_model=LegacyUserDeactivateResponse)
def deactivate_user(user_id: int, db: Session = Depends(get_db)):

    try:
        user = deactivate_legacy_user(db, user_id)

        return LegacyUserDeactivateResponse(
            success=True,
            message=f"사용자 {user.nome}이(가) 비활성화되었습니다.",
            data=LegacyUserResponse.model_validate(user)
        )

    except LegacyUserNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)

    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"사용자 ID {user_id} 비활성화 실패")
        raise HTTPException(
            status_code=500,
            detail="사용자 비활성화 중 데이터베이스 오류가 발생했습니다."
        )
