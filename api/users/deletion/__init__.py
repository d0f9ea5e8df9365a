"""
    레거시 사용자 연쇄 삭제 엔진

    graph        : 삭제 순서가 정해진 정적 테이블 기술자 목록
    resolver     : 사용자 소유 보호자/학생/입학 ID 해석 (전이 포함)
    executor     : 단계별 SAVEPOINT 실행 및 실패 격리
    orchestrator : 단일 트랜잭션 실행, 루트 삭제, 커밋/롤백
    result       : 테이블별 삭제 행 수 집계
"""

from .exceptions import (
    LegacyUserDeletionError,
    LegacyUserNotFound,
    LegacyUserDeletionFailed,
    DeletionTimeout,
    DeletionInProgress,
)
from .graph import (
    DELETION_GRAPH,
    OWNED_ENTITIES,
    AccessKind,
    DeletionStep,
    ModelDeletionStep,
    RawStatementStep,
    ReferenceKind,
    check_graph_order,
)
from .locks import DeletionLockRegistry, deletion_locks
from .orchestrator import LegacyUserDeletion
from .result import DeletionAggregator, DeletionPreview, DeletionSummary, StepOutcome, StepStatus

__all__ = [
    "LegacyUserDeletionError",
    "LegacyUserNotFound",
    "LegacyUserDeletionFailed",
    "DeletionTimeout",
    "DeletionInProgress",
    "DELETION_GRAPH",
    "OWNED_ENTITIES",
    "AccessKind",
    "DeletionStep",
    "ModelDeletionStep",
    "RawStatementStep",
    "ReferenceKind",
    "check_graph_order",
    "DeletionLockRegistry",
    "deletion_locks",
    "LegacyUserDeletion",
    "DeletionAggregator",
    "DeletionPreview",
    "DeletionSummary",
    "StepOutcome",
    "StepStatus",
]
