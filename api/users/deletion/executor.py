"""
    단계 실행기

    그래프 기술자 하나를 SAVEPOINT 안에서 실행합니다. 단계 수준의 오류
    (테이블/컬럼 부재, 일시적 제약 위반 등)는 그 단계만 롤백하고
    StepStatus.FAILED 결과로 돌려주며, 전체 삭제는 계속 진행됩니다.

    dry_run 실행기는 삭제를 그대로 수행하되 결과를 MATCHED 로 표시하며,
    바깥 트랜잭션의 롤백은 호출자(미리보기)가 책임집니다.
"""

from typing import Optional, Sequence

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .graph import DeletionStep
from .result import StepOutcome, StepStatus


def error_message(error: SQLAlchemyError) -> str:
    # DBAPI 원본 메시지가 있으면 그것만 사용 (SQL 전문 제외)
    orig = getattr(error, "orig", None)
    return str(orig) if orig is not None else str(error)


class StepExecutor:
    """트랜잭션 세션에 묶인 단계 실행기"""

    def __init__(self, db: Session, dry_run: bool = False):
        self.db = db
        self.dry_run = dry_run

    def _outcome(self, step: DeletionStep, status: StepStatus, rows: int = 0, error: Optional[str] = None) -> StepOutcome:
        return StepOutcome(
            table=step.table,
            column=step.column,
            reference=step.reference.value,
            access=step.access.value,
            status=status,
            rows=rows,
            error=error,
        )

    def run(self, step: DeletionStep, values: Sequence[int]) -> StepOutcome:
        """단계 삭제 실행"""

        # 소유 엔티티가 없으면 실행하지 않음 (실패 아님)
        if not values:
            logger.debug(f"{step.label}: 매칭 대상 없음, 건너뜀")
            return self._outcome(step, StepStatus.NOOP)

        try:
            with self.db.begin_nested():
                rows = step.delete(self.db, values)

        except SQLAlchemyError as e:
            message = error_message(e)
            logger.warning(f"⚠️ {step.table} 삭제 실패 ({step.column}), 0건으로 처리하고 계속 진행: {message}")
            return self._outcome(step, StepStatus.FAILED, error=message)

        if self.dry_run:
            logger.debug(f"{step.table}: {rows}건 삭제 예정")
            return self._outcome(step, StepStatus.MATCHED, rows=rows)

        if rows > 0:
            logger.info(f"✅ {step.table}: {rows}건 삭제 ({step.access.value})")
        else:
            logger.debug(f"{step.table}: 삭제 대상 없음")

        return self._outcome(step, StepStatus.DELETED, rows=rows)
