"""
    [ 레거시 사용자 삭제 서비스 ]

    사용자 관리 컨트롤러가 호출하는 삭제 엔진의 경계 함수들
"""

import os
from typing import Optional

from sqlalchemy.orm import Session

from users.deletion import DeletionPreview, DeletionSummary, LegacyUserDeletion


# 기본 제한 시간 (초)
def default_timeout() -> float:
    return float(os.getenv("LEGACY_USER_DELETE_TIMEOUT", "30"))


# 사용자와 모든 종속 데이터 삭제
# return: DeletionSummary
# raise: LegacyUserNotFound, LegacyUserDeletionFailed, DeletionInProgress
def delete_legacy_user(db: Session, user_id: int, timeout: Optional[float] = None) -> DeletionSummary:

    if timeout is None:
        timeout = default_timeout()

    return LegacyUserDeletion(db, timeout=timeout).execute(user_id)


# 삭제 시 함께 삭제될 행 수 미리보기
# return: DeletionPreview
def preview_legacy_user_deletion(db: Session, user_id: int) -> DeletionPreview:

    return LegacyUserDeletion(db).preview(user_id)
