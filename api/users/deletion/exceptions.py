"""
    레거시 사용자 삭제 예외

    - LegacyUserNotFound: 트랜잭션 시작 전 루트 사용자가 없음 (부작용 없음, 404)
    - LegacyUserDeletionFailed: 루트 삭제/커밋 실패 또는 제한 시간 초과, 전체 롤백 (500)
    - DeletionInProgress: 같은 사용자에 대한 삭제가 이미 진행 중 (409)

    개별 테이블 단계의 실패는 예외가 아니라 StepStatus.FAILED 결과로 기록됩니다.
"""

from typing import Optional


class LegacyUserDeletionError(Exception):
    """삭제 엔진 예외 기본 클래스"""

    def __init__(self, user_id: int, message: str):
        super().__init__(message)
        self.user_id = user_id
        self.message = message


class LegacyUserNotFound(LegacyUserDeletionError):

    def __init__(self, user_id: int):
        super().__init__(user_id, f"사용자 ID {user_id}를 찾을 수 없습니다.")


class LegacyUserDeletionFailed(LegacyUserDeletionError):

    def __init__(self, user_id: int, reason: Optional[str] = None):
        message = f"사용자 ID {user_id} 삭제에 실패했습니다. 변경 사항은 모두 롤백되었습니다."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(user_id, message)
        self.reason = reason


class DeletionTimeout(LegacyUserDeletionFailed):

    def __init__(self, user_id: int, timeout: float, stage: str):
        super().__init__(user_id, f"제한 시간 {timeout}초 초과 ({stage} 단계)")
        self.timeout = timeout
        self.stage = stage


class DeletionInProgress(LegacyUserDeletionError):

    def __init__(self, user_id: int):
        super().__init__(user_id, f"사용자 ID {user_id}에 대한 삭제가 이미 진행 중입니다.")
