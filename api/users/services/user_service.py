"""
    [ 레거시 사용자 서비스 ]

    삭제 외 단건 조회/비활성화 로직
"""

from sqlalchemy.orm import Session

from db.models.users import TbUtilizadores
from users.deletion.exceptions import LegacyUserNotFound


# 사용자 단건 조회
def get_legacy_user(db: Session, user_id: int) -> TbUtilizadores:

    user = db.query(TbUtilizadores).filter(
        TbUtilizadores.codigo == user_id
    ).first()

    if not user:
        raise LegacyUserNotFound(user_id)

    return user


# 사용자 비활성화: 삭제 대신 로그인만 차단
def deactivate_legacy_user(db: Session, user_id: int) -> TbUtilizadores:

    user = get_legacy_user(db, user_id)

    user.estadoActual = "INATIVO"
    user.loginStatus = "OFF"

    db.commit()
    db.refresh(user)

    return user
