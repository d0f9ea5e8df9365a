"""
    레거시 사용자 삭제 트랜잭션 오케스트레이터

    Begin -> Resolve -> [Step]* -> DeleteRoot -> Commit

    - 개별 단계 실패는 롤백을 일으키지 않습니다 (StepExecutor 정책).
    - 존재 확인/트랜잭션 시작 실패, 루트 삭제 실패, 커밋 실패, 제한 시간 초과만 치명적이며
      이 경우 이미 실행한 종속 행 삭제까지 전부 롤백합니다.
    - 제한 시간이 있으면 단계 사이 확인과 함께, 지원하는 DB(MySQL)에서는 남은 시간만큼
      세션의 잠금 대기 시간도 줄여 한 문장이 잠금에 무한정 묶이지 않게 합니다.
"""

import math
import time
from typing import Optional, Sequence

from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import TextClause

from db.models import TbUtilizadores
from .exceptions import (
    DeletionTimeout,
    LegacyUserDeletionError,
    LegacyUserDeletionFailed,
    LegacyUserNotFound,
)
from .executor import StepExecutor, error_message
from .graph import DELETION_GRAPH, DeletionStep
from .locks import DeletionLockRegistry, deletion_locks
from .resolver import resolve_owned_ids
from .result import DeletionAggregator, DeletionPreview, DeletionSummary


class Deadline:
    """호출자가 지정한 제한 시간 (None 이면 무제한)"""

    def __init__(self, user_id: int, timeout: Optional[float]):
        self.user_id = user_id
        self.timeout = timeout
        self.expires_at = None if timeout is None else time.monotonic() + timeout

    def remaining(self) -> Optional[float]:
        if self.expires_at is None:
            return None
        return max(0.0, self.expires_at - time.monotonic())

    def check(self, stage: str) -> None:
        if self.expires_at is not None and time.monotonic() >= self.expires_at:
            raise DeletionTimeout(self.user_id, self.timeout, stage)


# ============================================================================
# 잠금 대기 제한 (방언별)
# ============================================================================

def lock_wait_seconds(remaining: float) -> int:
    # innodb_lock_wait_timeout 은 1초 단위 정수, 최소 1
    return max(1, math.ceil(remaining))


def lock_wait_statement(dialect_name: str, seconds: int) -> Optional[TextClause]:
    """잠금 대기를 seconds 로 제한하는 세션 설정문 (지원하지 않는 방언은 None)"""
    if dialect_name == "mysql":
        return text("SET SESSION innodb_lock_wait_timeout = :seconds").bindparams(seconds=seconds)
    return None


def restore_lock_wait_statement(dialect_name: str) -> Optional[TextClause]:
    """세션 잠금 대기 시간을 전역 기본값으로 되돌리는 설정문"""
    if dialect_name == "mysql":
        return text("SET SESSION innodb_lock_wait_timeout = DEFAULT")
    return None


class LegacyUserDeletion:
    """레거시 사용자 연쇄 삭제"""

    def __init__(
        self,
        db: Session,
        graph: Sequence[DeletionStep] = DELETION_GRAPH,
        locks: DeletionLockRegistry = deletion_locks,
        timeout: Optional[float] = None,
    ):
        self.db = db
        self.graph = graph
        self.locks = locks
        self.timeout = timeout
        self._lock_wait: Optional[int] = None

    # ------------------------------------------------------------------ #

    def _ensure_exists(self, user_id: int) -> TbUtilizadores:
        """
        트랜잭션 시작 전 존재 확인 (쓰기 없음)

        Raises:
            LegacyUserNotFound: 사용자가 없음
            LegacyUserDeletionFailed: 조회 자체가 실패 (연결 끊김, 풀 고갈 등)
        """
        try:
            user = self.db.query(TbUtilizadores).filter(
                TbUtilizadores.codigo == user_id
            ).first()

        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"❌ 사용자 ID {user_id} 존재 확인 실패")
            raise LegacyUserDeletionFailed(user_id, error_message(e)) from e

        if not user:
            self.db.rollback()
            raise LegacyUserNotFound(user_id)

        return user

    def _lock_root(self, user_id: int) -> None:
        """루트 행 잠금"""
        locked = self.db.query(TbUtilizadores.codigo).filter(
            TbUtilizadores.codigo == user_id
        ).with_for_update().first()

        # 존재 확인 이후 다른 트랜잭션이 먼저 삭제한 경우
        if locked is None:
            raise LegacyUserNotFound(user_id)

    def _delete_root(self, user_id: int) -> None:
        deleted = self.db.query(TbUtilizadores).filter(
            TbUtilizadores.codigo == user_id
        ).delete(synchronize_session=False)

        if deleted != 1:
            raise LegacyUserDeletionFailed(user_id, f"루트 사용자 삭제 결과 {deleted}건")

    def _checkpoint(self, deadline: Deadline, stage: str) -> None:
        """제한 시간 확인 후 남은 시간을 세션 잠금 대기 시간에 반영"""
        deadline.check(stage)

        remaining = deadline.remaining()
        if remaining is None:
            return

        seconds = lock_wait_seconds(remaining)
        if seconds == self._lock_wait:
            return

        statement = lock_wait_statement(self.db.get_bind().dialect.name, seconds)
        if statement is None:
            return

        self.db.execute(statement)
        self._lock_wait = seconds

    def _restore_lock_wait(self, user_id: int) -> None:
        """세션 잠금 대기 시간을 기본값으로 복원"""
        if self._lock_wait is None:
            return

        self._lock_wait = None
        statement = restore_lock_wait_statement(self.db.get_bind().dialect.name)
        if statement is None:
            return

        try:
            self.db.execute(statement)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning(f"⚠️ 사용자 ID {user_id} 삭제 후 잠금 대기 설정 복원 실패: {error_message(e)}")

    # ------------------------------------------------------------------ #

    def execute(self, user_id: int) -> DeletionSummary:
        """
        사용자와 모든 종속 행을 하나의 트랜잭션으로 삭제

        Returns:
            DeletionSummary: 테이블별 삭제 행 수

        Raises:
            LegacyUserNotFound: 사용자가 없음 (부작용 없음)
            LegacyUserDeletionFailed: 전체 롤백됨
            DeletionInProgress: 같은 사용자 삭제가 진행 중
        """

        with self.locks.hold(user_id):
            logger.info(f"🗑️ 사용자 ID {user_id} 연쇄 삭제 시작")

            user = self._ensure_exists(user_id)
            user_name = user.nome
            deadline = Deadline(user_id, self.timeout)
            aggregator = DeletionAggregator(user_id)

            try:
                self.db.connection()

                self._checkpoint(deadline, "begin")
                self._lock_root(user_id)

                self._checkpoint(deadline, "resolve")
                owned = resolve_owned_ids(self.db, user_id)

                executor = StepExecutor(self.db)
                for step in self.graph:
                    self._checkpoint(deadline, step.label)
                    aggregator.record(executor.run(step, owned.values_for(step.reference)))

                self._checkpoint(deadline, "delete_root")
                self._delete_root(user_id)
                self.db.commit()

            except LegacyUserDeletionError as e:
                self.db.rollback()
                logger.error(f"❌ 사용자 ID {user_id} 삭제 중단, 전체 롤백: {e.message}")
                raise

            except SQLAlchemyError as e:
                self.db.rollback()
                logger.exception(f"❌ 사용자 ID {user_id} 삭제 실패, 전체 롤백")
                raise LegacyUserDeletionFailed(user_id, error_message(e)) from e

            finally:
                self._restore_lock_wait(user_id)

            summary = aggregator.summary()
            logger.info(f"✅ 사용자 {user_name}(ID {user_id}) 삭제 완료: {summary.message}")

            if summary.skipped_steps:
                logger.warning(
                    f"⚠️ 사용자 ID {user_id} 삭제 중 건너뛴 단계: "
                    + ", ".join(f"{s.table}.{s.column}" for s in summary.skipped_steps)
                )

            return summary

    def preview(self, user_id: int) -> DeletionPreview:
        """
        삭제 없이 단계별 대상 행 수만 조회

        실제 삭제와 같은 순서로 삭제를 수행한 뒤 전부 롤백하므로, 같은 테이블을
        여러 단계가 다루더라도 행이 두 번 세어지지 않습니다.
        """

        self._ensure_exists(user_id)
        aggregator = DeletionAggregator(user_id)

        try:
            owned = resolve_owned_ids(self.db, user_id)
            executor = StepExecutor(self.db, dry_run=True)
            for step in self.graph:
                aggregator.record(executor.run(step, owned.values_for(step.reference)))
        finally:
            self.db.rollback()

        return aggregator.preview()
