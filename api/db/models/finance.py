from sqlalchemy import Column, Integer, String, Date, Float, ForeignKey
from ..base import Base

class TbPagamentos(Base):
    """결제 테이블 (사용자와 학생 모두를 참조)"""
    __tablename__ = "tb_pagamentos"

    codigo = Column(Integer, primary_key=True, autoincrement=True, comment="결제 ID")
    codigo_Aluno = Column(Integer, ForeignKey("tb_alunos.codigo"), comment="학생 ID")
    codigo_Tipo_Servico = Column(Integer, comment="서비스 유형 ID")
    preco = Column(Float, comment="금액")
    data = Column(Date, comment="결제일")
    codigo_Utilizador = Column(Integer, ForeignKey("tb_utilizadores.codigo"), nullable=True, comment="처리한 사용자 ID")

    def __repr__(self):
        return f"<TbPagamentos(codigo={self.codigo}, codigo_Aluno={self.codigo_Aluno})>"


class TbPropinaClasse(Base):
    """학년별 수업료"""
    __tablename__ = "tb_propina_classe"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    codigoClasse = Column(Integer, comment="학년 ID")
    valor = Column(Float, comment="금액")
    codigoUtilizador = Column(Integer, ForeignKey("tb_utilizadores.codigo"), comment="등록한 사용자 ID")


class TbAnulacoes(Base):
    """결제 취소 기록"""
    __tablename__ = "tb_anulacoes"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    Motivo = Column(String(255), comment="취소 사유")
    Codigo_Utilizador = Column(Integer, ForeignKey("tb_utilizadores.codigo"), comment="처리한 사용자 ID")


class TbNotaCredito(Base):
    """크레딧 노트"""
    __tablename__ = "tb_nota_credito"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    codigo_aluno = Column(Integer, ForeignKey("tb_alunos.codigo"), comment="학생 ID")
    valor = Column(Float, comment="금액")


class TbServicoAluno(Base):
    """학생별 신청 서비스"""
    __tablename__ = "tb_servico_aluno"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    codigo_Aluno = Column(Integer, ForeignKey("tb_alunos.codigo"), comment="학생 ID")
    codigo_Servico = Column(Integer, comment="서비스 ID")


class TbContaAluno(Base):
    """학생 계좌"""
    __tablename__ = "tb_conta_aluno"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    Codigo_Aluno = Column(Integer, ForeignKey("tb_alunos.codigo"), comment="학생 ID")
    Saldo = Column(Float, comment="잔액")


class TbDepositoValor(Base):
    """예치금 입금 기록"""
    __tablename__ = "tb_deposito_valor"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    Codigo_Aluno = Column(Integer, ForeignKey("tb_alunos.codigo"), comment="학생 ID")
    Valor = Column(Float, comment="금액")
