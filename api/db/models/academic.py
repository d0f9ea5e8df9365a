from sqlalchemy import Column, Integer, String, Date, Text, Float, ForeignKey
from ..base import Base

class TbDocente(Base):
    """교사 테이블"""
    __tablename__ = "tb_docente"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(200), comment="교사 이름")
    codigo_Utilizador = Column(Integer, ForeignKey("tb_utilizadores.codigo"), comment="등록한 사용자 ID")


class TbGradeCurricular(Base):
    """교육과정 편성표"""
    __tablename__ = "tb_grade_curricular"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    codigo_disciplina = Column(Integer, comment="과목 ID")
    codigo_Classe = Column(Integer, comment="학년 ID")
    codigo_user = Column(Integer, ForeignKey("tb_utilizadores.codigo"), comment="등록한 사용자 ID")


# ============================================================================
# 입학(Matrícula)에 종속된 테이블
# ============================================================================

class TbDeclaracaoNotas(Base):
    """성적 증명서"""
    __tablename__ = "tb_declaracao_notas"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    Codigo_Matricula = Column(Integer, ForeignKey("tb_matriculas.codigo"), comment="입학 ID")
    Data = Column(Date, comment="발급일")


class TbDeclaracaoSemNota(Base):
    """성적 미포함 증명서"""
    __tablename__ = "tb_declaracao_sem_nota"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    Codigo_Matricula = Column(Integer, ForeignKey("tb_matriculas.codigo"), comment="입학 ID")
    Codigo_Utilizadores = Column(Integer, comment="발급한 사용자 ID")


class TbFaltas(Base):
    """결석 기록"""
    __tablename__ = "tb_faltas"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    Codigo_Matricula = Column(Integer, ForeignKey("tb_matriculas.codigo"), comment="입학 ID")
    Data = Column(Date, comment="결석일")


class TbMerito(Base):
    """우수 학생 기록"""
    __tablename__ = "tb_merito"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    Codigo_Matricula = Column(Integer, ForeignKey("tb_matriculas.codigo"), comment="입학 ID")
    Media = Column(Float, comment="평균 점수")


class TbProcessosDisciplinar(Base):
    """징계 절차"""
    __tablename__ = "tb_processos_disciplinar"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    Codigo_Matricula = Column(Integer, ForeignKey("tb_matriculas.codigo"), comment="입학 ID")
    Descricao = Column(Text, comment="내용")
    Codigo_Utilizador = Column(Integer, comment="등록한 사용자 ID")


# ============================================================================
# 학생(Aluno)에 종속된 테이블
# ============================================================================

class TbComportamento(Base):
    """학생 행동 기록"""
    __tablename__ = "tb_comportamento"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    Codigo_Aluno = Column(Integer, ForeignKey("tb_alunos.codigo"), comment="학생 ID")
    Observacao = Column(Text, comment="관찰 내용")
