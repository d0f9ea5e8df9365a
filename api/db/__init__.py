"""
레거시 학사 관리 Database Package
데이터베이스 연결, 세션 관리, 모델 정의를 담당하는 패키지

테이블 구조 (ORM 매핑 25개 테이블):
- 사용자: TbTiposUtilizador, TbUtilizadores, 권한/접속 기록
- 학생/입학: TbEncarregados, TbAlunos, TbMatriculas, TbPreConfirmacao, TbConfirmacoes
- 학사: TbDocente, TbGradeCurricular, 증명서/결석/우수/징계/행동 기록
- 재무: TbPagamentos, TbPropinaClasse, TbAnulacoes, 학생 계좌/예치금/크레딧 노트

ORM 매핑이 없는 레거시 테이블(tb_logs, tb_notas_* 등)은 삭제 그래프에서
raw SQL 단계로만 다룹니다.
"""

from loguru import logger

# 기본 데이터베이스 구성요소
from .base import Base, metadata
from .session import engine, SessionLocal, get_db

# ORM models
from .models import *  # noqa: F401,F403
from .models import __all__ as _model_names

__all__ = [
    # 데이터베이스 기본 구성요소
    "Base",
    "metadata",
    "engine",
    "SessionLocal",
    "get_db",

    # 유틸리티 함수
    "create_tables",
] + list(_model_names)

def create_tables(bind=None):
    """
    모든 테이블을 생성합니다.
    기존 테이블이 있어도 에러가 발생하지 않습니다.
    """
    Base.metadata.create_all(bind=bind or engine)
    logger.info("모든 테이블이 성공적으로 생성되었습니다.")
    return True
