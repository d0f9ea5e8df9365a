"""
    레거시 사용자 삭제 엔드포인트
"""

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.session import get_db
from users.deletion import DeletionInProgress, LegacyUserDeletionFailed, LegacyUserNotFound
from users.schema import LegacyUserDeleteResponse, LegacyUserDeletionPreviewResponse
from users.services.delete_service import delete_legacy_user, preview_legacy_user_deletion

# 라우터 생성
delete_router = APIRouter()

# 사용자 및 관련 데이터 연쇄 삭제 API
@delete_router.delete("/legacy/{user_id}", response_model=LegacyUserDeleteResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)):

    try:
        summary = delete_legacy_user(db, user_id)

        return LegacyUserDeleteResponse(
            success=True,
            message=summary.message,
            data=summary
        )

    except LegacyUserNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)

    except DeletionInProgress as e:
        raise HTTPException(status_code=409, detail=e.message)

    except LegacyUserDeletionFailed as e:
        raise HTTPException(status_code=500, detail=e.message)


# 삭제 미리보기 API
@delete_router.get("/legacy/{user_id}/deletion-preview", response_model=LegacyUserDeletionPreviewResponse)
def preview_user_deletion(user_id: int, db: Session = Depends(get_db)):

    try:
        preview = preview_legacy_user_deletion(db, user_id)

        return LegacyUserDeletionPreviewResponse(
            success=True,
            message=preview.message,
            data=preview
        )

    except LegacyUserNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)

    except (LegacyUserDeletionFailed, SQLAlchemyError):
        logger.exception(f"사용자 ID {user_id} 삭제 미리보기 실패")
        raise HTTPException(
            status_code=500,
            detail="삭제 미리보기 중 데이터베이스 오류가 발생했습니다."
        )
