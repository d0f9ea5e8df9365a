"""테스트 공용 조회 함수"""

from sqlalchemy import bindparam, text


def count_rows(session, table: str, where: str = "1=1", **params) -> int:
    return session.execute(text(f"SELECT COUNT(*) FROM {table} WHERE {where}"), params).scalar()


def snapshot(session) -> dict:
    """모든 테이블의 행 수"""
    tables = [
        row[0] for row in session.execute(text(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
        ))
    ]
    return {table: count_rows(session, table) for table in sorted(tables)}


def remaining_rows(session, table: str, column: str, values) -> int:
    """column IN values 인 남은 행 수"""
    statement = text(
        f'SELECT COUNT(*) FROM "{table}" WHERE "{column}" IN :values'
    ).bindparams(bindparam("values", expanding=True))
    return session.execute(statement, {"values": list(values)}).scalar()


def foreign_key_violations(session) -> list:
    return session.execute(text("PRAGMA foreign_key_check")).fetchall()
