"""
    간접 참조 해석기

    많은 종속 테이블은 사용자 ID가 아니라 사용자가 소유한 보호자/학생/입학 ID를 참조하므로,
    그래프 실행 전에 소유 엔티티별 ID 집합을 먼저 계산합니다.

    소유는 전이적입니다. 사용자 소유 보호자의 학생, 사용자 소유 학생의 입학은
    다른 사용자가 등록했더라도 함께 삭제 대상이 됩니다.
"""

from typing import Dict, Mapping, Tuple

from loguru import logger
from sqlalchemy import or_
from sqlalchemy.orm import Session

from .graph import OWNED_ENTITIES, OwnedEntity, ReferenceKind


class OwnedIds:
    """참조 방식별 매칭 값 목록"""

    def __init__(self, user_id: int, ids: Dict[ReferenceKind, Tuple[int, ...]]):
        self.user_id = user_id
        self._ids = dict(ids)
        self._ids[ReferenceKind.DIRECT] = (user_id,)

    def values_for(self, reference: ReferenceKind) -> Tuple[int, ...]:
        return self._ids.get(reference, ())

    def __repr__(self):
        sizes = {kind.value: len(values) for kind, values in self._ids.items()}
        return f"<OwnedIds(user_id={self.user_id}, {sizes})>"


def resolve_owned_ids(
    db: Session,
    user_id: int,
    owned: Mapping[ReferenceKind, OwnedEntity] = OWNED_ENTITIES,
) -> OwnedIds:
    """
    사용자 소유 엔티티 ID 조회

    Args:
        db: 트랜잭션 세션
        user_id: 루트 사용자 ID
        owned: 참조 방식별 소유 엔티티 정의 (상위 엔티티가 먼저 와야 함)

    Returns:
        OwnedIds: 소유 엔티티가 없으면 해당 방식의 값은 빈 튜플

    Raises:
        ValueError: via 로 지정한 상위 엔티티가 아직 해석되지 않음
    """

    ids: Dict[ReferenceKind, Tuple[int, ...]] = {}

    for kind, entity in owned.items():
        condition = entity.owner_column == user_id

        if entity.via is not None:
            via_column, parent_kind = entity.via
            if parent_kind not in ids:
                raise ValueError(f"{entity.table}의 상위 소유 엔티티({parent_kind.value})가 먼저 해석되어야 합니다.")

            parent_ids = ids[parent_kind]
            if parent_ids:
                condition = or_(condition, via_column.in_(list(parent_ids)))

        rows = db.query(entity.id_column).filter(
            condition
        ).order_by(entity.id_column).all()

        ids[kind] = tuple(row[0] for row in rows)
        logger.debug(f"사용자 {user_id} 소유 {entity.table}: {len(ids[kind])}건")

    return OwnedIds(user_id, ids)
