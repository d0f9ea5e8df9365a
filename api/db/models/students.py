from sqlalchemy import Column, Integer, String, Date, ForeignKey
from ..base import Base

class TbEncarregados(Base):
    """보호자(Encarregado) 테이블"""
    __tablename__ = "tb_encarregados"

    codigo = Column(Integer, primary_key=True, autoincrement=True, comment="보호자 ID")
    nome = Column(String(250), comment="보호자 이름")
    telefone = Column(String(45), comment="연락처")
    codigo_Utilizador = Column(Integer, ForeignKey("tb_utilizadores.codigo"), comment="등록한 사용자 ID")


class TbAlunos(Base):
    """학생 테이블 (사용자가 소유하는 엔티티)"""
    __tablename__ = "tb_alunos"

    codigo = Column(Integer, primary_key=True, autoincrement=True, comment="학생 ID")
    nome = Column(String(200), comment="학생 이름")
    codigo_Encarregado = Column(Integer, ForeignKey("tb_encarregados.codigo"), nullable=True, comment="보호자 ID")
    codigo_Utilizador = Column(Integer, ForeignKey("tb_utilizadores.codigo"), comment="등록한 사용자 ID")

    def __repr__(self):
        return f"<TbAlunos(codigo={self.codigo}, nome={self.nome})>"


class TbMatriculas(Base):
    """입학(Matrícula) 테이블 (사용자가 소유하는 엔티티)"""
    __tablename__ = "tb_matriculas"

    codigo = Column(Integer, primary_key=True, autoincrement=True, comment="입학 ID")
    codigo_Aluno = Column(Integer, ForeignKey("tb_alunos.codigo"), comment="학생 ID")
    codigo_Curso = Column(Integer, comment="과정 ID")
    data_Matricula = Column(Date, comment="입학일")
    codigo_Utilizador = Column(Integer, ForeignKey("tb_utilizadores.codigo"), comment="등록한 사용자 ID")

    def __repr__(self):
        return f"<TbMatriculas(codigo={self.codigo}, codigo_Aluno={self.codigo_Aluno})>"


class TbPreConfirmacao(Base):
    """재등록 사전 확인"""
    __tablename__ = "tb_pre_confirmacao"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    CodigoUtilizador = Column(Integer, ForeignKey("tb_utilizadores.codigo"), comment="사용자 ID")
    CodigoTurma = Column(Integer, comment="반 ID")


class TbConfirmacoes(Base):
    """연도별 재등록 확인(Confirmação)"""
    __tablename__ = "tb_confirmacoes"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    codigo_Matricula = Column(Integer, ForeignKey("tb_matriculas.codigo"), comment="입학 ID")
    codigo_Turma = Column(Integer, comment="반 ID")
    data_Confirmacao = Column(Date, comment="확인일")
    codigo_Utilizador = Column(Integer, ForeignKey("tb_utilizadores.codigo"), comment="등록한 사용자 ID")
