from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from ..base import Base

class TbTiposUtilizador(Base):
    """사용자 유형 테이블"""
    __tablename__ = "tb_tipos_utilizador"

    codigo = Column(Integer, primary_key=True, autoincrement=True, comment="사용자 유형 ID")
    designacao = Column(String(45), nullable=False, comment="유형명 (Administrador, Secretaria 등)")


class TbUtilizadores(Base):
    """레거시 사용자 테이블 (삭제 엔진의 루트 엔티티)"""
    __tablename__ = "tb_utilizadores"

    codigo = Column(Integer, primary_key=True, autoincrement=True, comment="사용자 고유 ID")
    nome = Column(String(45), nullable=False, comment="사용자 이름")
    user = Column(String(45), unique=True, nullable=False, comment="로그인 ID")
    passe = Column(String(255), nullable=False, comment="비밀번호")
    codigo_Tipo_Utilizador = Column(Integer, ForeignKey("tb_tipos_utilizador.codigo"), comment="사용자 유형 ID")
    estadoActual = Column(String(45), default="ATIVO", comment="상태 (ATIVO, INATIVO)")
    dataCadastro = Column(DateTime, comment="등록일")
    loginStatus = Column(String(45), default="OFF", comment="로그인 상태 (ON, OFF)")

    def __repr__(self):
        return f"<TbUtilizadores(codigo={self.codigo}, user={self.user})>"


class TbItemPermissaoUtilizador(Base):
    """사용자별 권한 항목"""
    __tablename__ = "tb_item_permissao_utilizador"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    codigo_Utilizador = Column(Integer, ForeignKey("tb_utilizadores.codigo"), comment="사용자 ID")
    codigo_Item = Column(Integer, comment="권한 항목 ID")


class TbPermissaoTurmaUtilizador(Base):
    """사용자별 반(Turma) 접근 권한"""
    __tablename__ = "tb_permissao_turma_utilizador"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    codigoUtilizador = Column(Integer, ForeignKey("tb_utilizadores.codigo"), comment="사용자 ID")
    codigoTurma = Column(Integer, comment="반 ID")


class TbAcessosSistema(Base):
    """시스템 접속 기록"""
    __tablename__ = "tb_acessos_sistema"

    codigo = Column(Integer, primary_key=True, autoincrement=True)
    CodigoUtilizador = Column(Integer, ForeignKey("tb_utilizadores.codigo"), comment="사용자 ID")
    dataAcesso = Column(DateTime, comment="접속 시각")
