"""공통 테스트 픽스처"""

import os

# db.session 이 import 될 때 MySQL 엔진을 만들지 않도록 먼저 지정
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date

import pytest
from loguru import logger
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import create_tables
from db.models import (
    TbTiposUtilizador,
    TbUtilizadores,
    TbItemPermissaoUtilizador,
    TbAcessosSistema,
    TbEncarregados,
    TbAlunos,
    TbMatriculas,
    TbConfirmacoes,
    TbFaltas,
    TbMerito,
    TbDeclaracaoSemNota,
    TbProcessosDisciplinar,
    TbComportamento,
    TbPagamentos,
    TbNotaCredito,
    TbDocente,
)

# 테스트 배포에 존재하는 레거시(raw) 테이블. 나머지는 일부러 만들지 않음
LEGACY_TABLES_DDL = [
    "CREATE TABLE tb_logs (codigo INTEGER PRIMARY KEY, CodigoUtilizador INTEGER, Descricao TEXT)",
    "CREATE TABLE tb_propinas (codigo INTEGER PRIMARY KEY, Codigo_Utilizador INTEGER, Valor REAL)",
    "CREATE TABLE tb_recibo (codigo INTEGER PRIMARY KEY, codigo_utilizador INTEGER)",
]

ROOT_ID = 500
OTHER_USER_ID = 501


# ==================== 데이터베이스 ====================

@pytest.fixture
def engine():
    """외래키 검사와 SAVEPOINT 가 동작하는 인메모리 SQLite"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # pysqlite 자체 트랜잭션 처리를 끄고 SQLAlchemy 가 BEGIN 을 직접 보냄
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    create_tables(bind=engine)
    with engine.begin() as conn:
        for ddl in LEGACY_TABLES_DDL:
            conn.exec_driver_sql(ddl)

    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def log_messages():
    """loguru 로그 수집"""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)


# ==================== 시드 데이터 ====================

@pytest.fixture
def school(db):
    """
    사용자 500: 입학 10, 11 / 학생 20 소유
    사용자 501: 입학 12 / 학생 99 소유 (삭제되면 안 되는 데이터)

    결제 1~3 은 학생 20, 결제 4 는 학생 99 를 참조하며 모두 사용자 501 이 처리함
    """
    db.add(TbTiposUtilizador(codigo=1, designacao="Secretaria"))
    db.add_all([
        TbUtilizadores(codigo=ROOT_ID, nome="Ana Legada", user="ana", passe="x", codigo_Tipo_Utilizador=1),
        TbUtilizadores(codigo=OTHER_USER_ID, nome="Bruno Caixa", user="bruno", passe="x", codigo_Tipo_Utilizador=1),
    ])
    db.flush()

    db.add_all([
        TbEncarregados(codigo=1, nome="Encarregado A", codigo_Utilizador=ROOT_ID),
        TbEncarregados(codigo=2, nome="Encarregado B", codigo_Utilizador=OTHER_USER_ID),
    ])
    db.flush()

    db.add_all([
        TbAlunos(codigo=20, nome="Aluno Vinte", codigo_Encarregado=1, codigo_Utilizador=ROOT_ID),
        TbAlunos(codigo=99, nome="Aluno Noventa e Nove", codigo_Encarregado=2, codigo_Utilizador=OTHER_USER_ID),
    ])
    db.flush()

    db.add_all([
        TbMatriculas(codigo=10, codigo_Aluno=20, codigo_Curso=1, data_Matricula=date(2023, 2, 1), codigo_Utilizador=ROOT_ID),
        TbMatriculas(codigo=11, codigo_Aluno=20, codigo_Curso=2, data_Matricula=date(2024, 2, 1), codigo_Utilizador=ROOT_ID),
        TbMatriculas(codigo=12, codigo_Aluno=99, codigo_Curso=1, data_Matricula=date(2024, 2, 1), codigo_Utilizador=OTHER_USER_ID),
    ])
    db.flush()

    db.add_all([
        # 입학 경유 종속 행
        TbFaltas(codigo=1, Codigo_Matricula=10, Data=date(2024, 3, 4)),
        TbFaltas(codigo=2, Codigo_Matricula=11, Data=date(2024, 3, 5)),
        TbFaltas(codigo=3, Codigo_Matricula=12, Data=date(2024, 3, 5)),
        TbMerito(codigo=1, Codigo_Matricula=11, Media=17.5),
        TbConfirmacoes(codigo=1, codigo_Matricula=10, codigo_Turma=3, codigo_Utilizador=OTHER_USER_ID),
        TbConfirmacoes(codigo=2, codigo_Matricula=12, codigo_Turma=3, codigo_Utilizador=OTHER_USER_ID),
        TbDeclaracaoSemNota(codigo=1, Codigo_Matricula=12, Codigo_Utilizadores=ROOT_ID),
        TbProcessosDisciplinar(codigo=1, Codigo_Matricula=12, Descricao="-", Codigo_Utilizador=OTHER_USER_ID),

        # 학생 경유 종속 행
        TbPagamentos(codigo=1, codigo_Aluno=20, preco=100.0, codigo_Utilizador=OTHER_USER_ID),
        TbPagamentos(codigo=2, codigo_Aluno=20, preco=150.0, codigo_Utilizador=OTHER_USER_ID),
        TbPagamentos(codigo=3, codigo_Aluno=20, preco=200.0, codigo_Utilizador=OTHER_USER_ID),
        TbPagamentos(codigo=4, codigo_Aluno=99, preco=100.0, codigo_Utilizador=OTHER_USER_ID),
        TbComportamento(codigo=1, Codigo_Aluno=20, Observacao="-"),
        TbNotaCredito(codigo=1, codigo_aluno=99, valor=10.0),

        # 사용자 직접 참조
        TbItemPermissaoUtilizador(codigo=1, codigo_Utilizador=ROOT_ID, codigo_Item=1),
        TbItemPermissaoUtilizador(codigo=2, codigo_Utilizador=ROOT_ID, codigo_Item=2),
        TbItemPermissaoUtilizador(codigo=3, codigo_Utilizador=OTHER_USER_ID, codigo_Item=1),
        TbAcessosSistema(codigo=1, CodigoUtilizador=ROOT_ID),
        TbDocente(codigo=1, nome="Docente", codigo_Utilizador=ROOT_ID),
    ])

    db.execute(text(
        "INSERT INTO tb_logs (codigo, CodigoUtilizador, Descricao) VALUES "
        "(1, 500, 'login'), (2, 500, 'logout'), (3, 501, 'login')"
    ))
    db.execute(text("INSERT INTO tb_propinas (codigo, Codigo_Utilizador, Valor) VALUES (1, 501, 50.0)"))
    db.commit()

    return {"root_id": ROOT_ID, "other_user_id": OTHER_USER_ID}


@pytest.fixture
def shared_students(db, school):
    """
    사용자 501 이 사용자 500 소유 학생/보호자에 연결해 등록한 데이터

    - 입학 13: 학생 20(사용자 500 소유)의 입학, 결석 4 / 확인 3 이 참조
    - 학생 21: 보호자 1(사용자 500 소유)의 학생, 입학 14 / 결제 5 가 참조
    """
    db.add_all([
        TbMatriculas(codigo=13, codigo_Aluno=20, codigo_Curso=3, data_Matricula=date(2025, 2, 1), codigo_Utilizador=OTHER_USER_ID),
        TbAlunos(codigo=21, nome="Aluno Vinte e Um", codigo_Encarregado=1, codigo_Utilizador=OTHER_USER_ID),
    ])
    db.flush()

    db.add(TbMatriculas(codigo=14, codigo_Aluno=21, codigo_Curso=1, data_Matricula=date(2025, 2, 1), codigo_Utilizador=OTHER_USER_ID))
    db.flush()

    db.add_all([
        TbFaltas(codigo=4, Codigo_Matricula=13, Data=date(2025, 3, 4)),
        TbConfirmacoes(codigo=3, codigo_Matricula=13, codigo_Turma=4, codigo_Utilizador=OTHER_USER_ID),
        TbMerito(codigo=2, Codigo_Matricula=14, Media=15.0),
        TbPagamentos(codigo=5, codigo_Aluno=21, preco=120.0, codigo_Utilizador=OTHER_USER_ID),
    ])
    db.commit()

    return {"enrollments": (13, 14), "students": (21,)}
