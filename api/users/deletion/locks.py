"""
    사용자별 삭제 잠금

    같은 사용자 ID에 대한 삭제가 동시에 실행되지 않도록 프로세스 내에서
    "삭제 중" 상태를 관리합니다. 다중 프로세스 환경에서는 오케스트레이터가
    루트 행에 거는 SELECT ... FOR UPDATE 잠금이 함께 동작합니다.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, Set

from .exceptions import DeletionInProgress


class DeletionLockRegistry:
    """삭제 중인 사용자 ID 목록"""

    def __init__(self):
        self._mutex = threading.Lock()
        self._active: Set[int] = set()

    def acquire(self, user_id: int) -> bool:
        """잠금 획득, 이미 삭제 중이면 False"""
        with self._mutex:
            if user_id in self._active:
                return False
            self._active.add(user_id)
            return True

    def release(self, user_id: int) -> None:
        with self._mutex:
            self._active.discard(user_id)

    def is_locked(self, user_id: int) -> bool:
        with self._mutex:
            return user_id in self._active

    @contextmanager
    def hold(self, user_id: int) -> Iterator[None]:
        """
        삭제 구간 동안 잠금 유지

        Raises:
            DeletionInProgress: 다른 요청이 같은 사용자를 삭제 중
        """
        if not self.acquire(user_id):
            raise DeletionInProgress(user_id)
        try:
            yield
        finally:
            self.release(user_id)


# 프로세스 전역 잠금 목록
deletion_locks = DeletionLockRegistry()
