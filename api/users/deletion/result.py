"""
    삭제 결과 집계

    그래프의 각 단계 결과(StepOutcome)를 받아 테이블별 행 수를 누적하고,
    호출자에게 돌려줄 단일 요약(DeletionSummary / DeletionPreview)을 만듭니다.
    집계기는 감사/로그/응답 구성 용도이며 제어 흐름에는 관여하지 않습니다.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field

# ============================================================================
# 공통 모델
# ============================================================================

class StepStatus(str, Enum):
    """단계 실행 결과"""
    DELETED = "deleted"    # 삭제 실행 (0행 포함)
    MATCHED = "matched"    # 미리보기: 삭제 후 롤백된 대상 행 수
    NOOP = "noop"          # 소유 엔티티가 없어 실행하지 않음
    FAILED = "failed"      # 테이블/컬럼 부재 등으로 실패, 0행으로 처리 후 계속 진행


class StepOutcome(BaseModel):
    """그래프 단계 하나의 실행 결과"""
    table: str
    column: str
    reference: str
    access: str
    status: StepStatus
    rows: int = 0
    error: Optional[str] = None

    class Config:
        frozen = True


class SkippedStep(BaseModel):
    """실패로 건너뛴 단계"""
    table: str
    column: str
    error: str

    class Config:
        frozen = True


class DeletionSummary(BaseModel):
    """삭제 완료 요약"""
    user_id: int
    counts: Dict[str, int] = Field(default_factory=dict, description="테이블별 삭제 행 수")
    total_deleted: int = 0
    tables_affected: Tuple[str, ...] = ()
    skipped_steps: Tuple[SkippedStep, ...] = ()
    message: str

    class Config:
        frozen = True


class DeletionPreview(BaseModel):
    """삭제 미리보기 (실제 삭제 없음)"""
    user_id: int
    counts: Dict[str, int] = Field(default_factory=dict, description="테이블별 삭제 예정 행 수")
    total_rows: int = 0
    unavailable_steps: Tuple[SkippedStep, ...] = ()
    message: str

    class Config:
        frozen = True


# ============================================================================
# 집계기
# ============================================================================

class DeletionAggregator:
    """단계별 결과 누적"""

    def __init__(self, user_id: int):
        self.user_id = user_id
        self._counts: Dict[str, int] = {}
        self._outcomes: List[StepOutcome] = []

    @property
    def outcomes(self) -> List[StepOutcome]:
        return list(self._outcomes)

    def record(self, outcome: StepOutcome) -> None:
        # 같은 테이블에 단계가 여러 개면 합산
        self._counts[outcome.table] = self._counts.get(outcome.table, 0) + outcome.rows
        self._outcomes.append(outcome)

    def _skipped(self) -> Tuple[SkippedStep, ...]:
        return tuple(
            SkippedStep(table=o.table, column=o.column, error=o.error or "")
            for o in self._outcomes
            if o.status == StepStatus.FAILED
        )

    def summary(self) -> DeletionSummary:
        total = sum(self._counts.values())
        tables_affected = tuple(table for table, rows in self._counts.items() if rows > 0)
        skipped = self._skipped()

        message = (
            f"사용자 {self.user_id} 및 관련 데이터가 삭제되었습니다: "
            f"{len(tables_affected)}개 테이블에서 총 {total}개 행 삭제"
        )
        if skipped:
            message += f" ({len(skipped)}개 단계 건너뜀)"

        return DeletionSummary(
            user_id=self.user_id,
            counts=dict(self._counts),
            total_deleted=total,
            tables_affected=tables_affected,
            skipped_steps=skipped,
            message=message,
        )

    def preview(self) -> DeletionPreview:
        total = sum(self._counts.values())
        unavailable = self._skipped()
        return DeletionPreview(
            user_id=self.user_id,
            counts=dict(self._counts),
            total_rows=total,
            unavailable_steps=unavailable,
            message=f"사용자 {self.user_id} 삭제 시 총 {total}개 행이 함께 삭제됩니다.",
        )
