"""
    레거시 사용자 삭제 그래프

    루트 사용자(tb_utilizadores)를 직접 또는 소유 엔티티(보호자, 학생, 입학)를 거쳐
    참조하는 모든 테이블을 삭제 순서대로 나열한 정적 목록입니다.

    - 종속 테이블은 반드시 자신이 참조하는 테이블보다 먼저 나옵니다.
    - 루트 사용자는 그래프에 포함되지 않으며 오케스트레이터가 마지막에 삭제합니다.
    - 스키마에 새 관계가 생기면 이 목록을 함께 갱신해야 합니다 (런타임 스키마 탐색 없음).
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from sqlalchemy import bindparam, text
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import InstrumentedAttribute

from db.models import (
    TbUtilizadores,
    TbItemPermissaoUtilizador,
    TbPermissaoTurmaUtilizador,
    TbAcessosSistema,
    TbEncarregados,
    TbAlunos,
    TbMatriculas,
    TbPreConfirmacao,
    TbConfirmacoes,
    TbDocente,
    TbGradeCurricular,
    TbDeclaracaoNotas,
    TbDeclaracaoSemNota,
    TbFaltas,
    TbMerito,
    TbProcessosDisciplinar,
    TbComportamento,
    TbPagamentos,
    TbPropinaClasse,
    TbAnulacoes,
    TbNotaCredito,
    TbServicoAluno,
    TbContaAluno,
    TbDepositoValor,
)

ROOT_TABLE = TbUtilizadores.__tablename__

# ============================================================================
# 기술자 종류
# ============================================================================

class ReferenceKind(str, Enum):
    """행이 루트를 참조하는 방식"""
    DIRECT = "direct"                    # 사용자 ID 직접 참조
    VIA_GUARDIAN = "via_guardian"        # 사용자 소유 보호자(tb_encarregados) ID 참조
    VIA_STUDENT = "via_student"          # 사용자 소유 학생(tb_alunos) ID 참조
    VIA_ENROLLMENT = "via_enrollment"    # 사용자 소유 입학(tb_matriculas) ID 참조


class AccessKind(str, Enum):
    """삭제 실행 방식"""
    STRUCTURED = "structured"    # ORM 매핑 모델
    RAW = "raw"                  # 매핑이 없는 레거시 테이블, 파라미터 바인딩 raw SQL


class OwnedEntity:
    """
    루트 사용자가 소유하는 엔티티 (보호자, 학생, 입학)

    owner_column 이 사용자 ID 인 행과, via 로 지정한 상위 소유 엔티티를 참조하는 행을
    모두 소유로 봅니다. 예: 다른 사용자가 등록했더라도 이 사용자 소유 학생의 입학은
    이 사용자 소유 입학입니다.
    """

    def __init__(
        self,
        id_column: InstrumentedAttribute,
        owner_column: InstrumentedAttribute,
        via: Optional[Tuple[InstrumentedAttribute, ReferenceKind]] = None,
    ):
        self.id_column = id_column
        self.owner_column = owner_column
        self.via = via
        self.table = id_column.class_.__tablename__

    def __repr__(self):
        return f"<OwnedEntity(table={self.table})>"


# 상위 엔티티가 먼저 오도록 정렬 (해석기가 이 순서대로 ID 집합을 넓혀감)
OWNED_ENTITIES: Dict[ReferenceKind, OwnedEntity] = {
    ReferenceKind.VIA_GUARDIAN: OwnedEntity(
        TbEncarregados.codigo, TbEncarregados.codigo_Utilizador,
    ),
    ReferenceKind.VIA_STUDENT: OwnedEntity(
        TbAlunos.codigo, TbAlunos.codigo_Utilizador,
        via=(TbAlunos.codigo_Encarregado, ReferenceKind.VIA_GUARDIAN),
    ),
    ReferenceKind.VIA_ENROLLMENT: OwnedEntity(
        TbMatriculas.codigo, TbMatriculas.codigo_Utilizador,
        via=(TbMatriculas.codigo_Aluno, ReferenceKind.VIA_STUDENT),
    ),
}

# ============================================================================
# 기술자
# ============================================================================

class DeletionStep(ABC):
    """컬럼 값 목록으로 행을 삭제할 수 있는 테이블 기술자"""

    access: AccessKind
    table: str
    column: str
    reference: ReferenceKind

    @abstractmethod
    def delete(self, db: Session, values: Sequence[int]) -> int:
        """column IN values 인 행을 삭제하고 삭제된 행 수를 반환"""
        pass

    def referenced_tables(self) -> FrozenSet[str]:
        """이 테이블이 외래키로 참조하는 테이블 목록 (알 수 없으면 빈 집합)"""
        return frozenset()

    @property
    def label(self) -> str:
        return f"{self.table}.{self.column}"

    def __repr__(self):
        return f"<{self.__class__.__name__}({self.label}, {self.reference.value})>"


class ModelDeletionStep(DeletionStep):
    """ORM 매핑 모델 기반 삭제 단계

    매핑된 컬럼 속성을 받으므로 컬럼명 오타는 import 시점에 드러납니다.
    """

    access = AccessKind.STRUCTURED

    def __init__(self, attribute: InstrumentedAttribute, reference: ReferenceKind = ReferenceKind.DIRECT):
        if not isinstance(attribute, InstrumentedAttribute):
            raise TypeError(f"매핑된 컬럼 속성이 필요합니다: {attribute!r}")

        self.attribute = attribute
        self.model = attribute.class_
        self.table = self.model.__tablename__
        self.column = attribute.property.columns[0].name
        self.reference = reference

    def delete(self, db: Session, values: Sequence[int]) -> int:
        return db.query(self.model).filter(
            self.attribute.in_(list(values))
        ).delete(synchronize_session=False)

    def referenced_tables(self) -> FrozenSet[str]:
        return frozenset(
            fk.target_fullname.split(".")[0]
            for fk in self.model.__table__.foreign_keys
        )


class RawStatementStep(DeletionStep):
    """ORM 매핑이 없는 레거시 테이블용 raw SQL 삭제 단계

    식별자는 방언 규칙으로 인용하고 값은 항상 바인딩 파라미터로 전달합니다.
    """

    access = AccessKind.RAW

    def __init__(self, table: str, column: str, reference: ReferenceKind = ReferenceKind.DIRECT):
        self.table = table
        self.column = column
        self.reference = reference

    def _target(self, db: Session) -> Tuple[str, str]:
        preparer = db.get_bind().dialect.identifier_preparer
        return preparer.quote(self.table), preparer.quote(self.column)

    def delete(self, db: Session, values: Sequence[int]) -> int:
        table, column = self._target(db)
        statement = text(
            f"DELETE FROM {table} WHERE {column} IN :values"
        ).bindparams(bindparam("values", expanding=True))
        return db.execute(statement, {"values": list(values)}).rowcount


# ============================================================================
# 삭제 그래프 (순서가 곧 실행 순서)
# ============================================================================

DELETION_GRAPH: Tuple[DeletionStep, ...] = (
    # 1. 사용자에 직접 연결된 권한/기록
    ModelDeletionStep(TbItemPermissaoUtilizador.codigo_Utilizador),
    ModelDeletionStep(TbPermissaoTurmaUtilizador.codigoUtilizador),
    ModelDeletionStep(TbAcessosSistema.CodigoUtilizador),
    ModelDeletionStep(TbAnulacoes.Codigo_Utilizador),
    ModelDeletionStep(TbGradeCurricular.codigo_user),
    ModelDeletionStep(TbPropinaClasse.codigoUtilizador),
    ModelDeletionStep(TbPagamentos.codigo_Utilizador),
    ModelDeletionStep(TbPreConfirmacao.CodigoUtilizador),

    # 2. 사용자 소유 입학에 종속된 행
    ModelDeletionStep(TbDeclaracaoNotas.Codigo_Matricula, ReferenceKind.VIA_ENROLLMENT),
    ModelDeletionStep(TbDeclaracaoSemNota.Codigo_Matricula, ReferenceKind.VIA_ENROLLMENT),
    ModelDeletionStep(TbFaltas.Codigo_Matricula, ReferenceKind.VIA_ENROLLMENT),
    ModelDeletionStep(TbMerito.Codigo_Matricula, ReferenceKind.VIA_ENROLLMENT),
    ModelDeletionStep(TbProcessosDisciplinar.Codigo_Matricula, ReferenceKind.VIA_ENROLLMENT),
    ModelDeletionStep(TbConfirmacoes.codigo_Matricula, ReferenceKind.VIA_ENROLLMENT),

    # 3. 사용자 소유 학생에 종속된 행
    ModelDeletionStep(TbNotaCredito.codigo_aluno, ReferenceKind.VIA_STUDENT),
    ModelDeletionStep(TbServicoAluno.codigo_Aluno, ReferenceKind.VIA_STUDENT),
    ModelDeletionStep(TbComportamento.Codigo_Aluno, ReferenceKind.VIA_STUDENT),
    ModelDeletionStep(TbContaAluno.Codigo_Aluno, ReferenceKind.VIA_STUDENT),
    ModelDeletionStep(TbDepositoValor.Codigo_Aluno, ReferenceKind.VIA_STUDENT),
    ModelDeletionStep(TbPagamentos.codigo_Aluno, ReferenceKind.VIA_STUDENT),

    # 4. 성적/로그 등 레거시 테이블 (배포마다 존재 여부가 다름)
    RawStatementStep("tb_logs", "CodigoUtilizador"),
    RawStatementStep("tb_notas", "CodigoUtilizador"),
    RawStatementStep("tb_notas_1_4", "CodigoUtilizador"),
    RawStatementStep("tb_notas_5_6", "CodigoUtilizador"),
    RawStatementStep("tb_notas_7_9", "CodigoUtilizador"),
    RawStatementStep("tb_notas_alunos", "CodigoUtilizador"),
    RawStatementStep("tb_notas_contgest_10_12", "CodigoUtilizador"),
    RawStatementStep("tb_notas_enfermagem_10_12", "CodigoUtilizador"),
    RawStatementStep("tb_notas_fis_bio_10_12", "CodigoUtilizador"),
    RawStatementStep("tb_notas_jur_econ_10_12", "CodigoUtilizador"),
    RawStatementStep("tb_ocorrencias_alunos", "CodigoUtilizador"),
    RawStatementStep("tb_pauta", "codigo_Utilizador"),
    RawStatementStep("tb_pedidos_declaracao", "CodigoUtilizador"),
    ModelDeletionStep(TbProcessosDisciplinar.Codigo_Utilizador),
    RawStatementStep("tb_propinas", "Codigo_Utilizador"),
    RawStatementStep("tb_recibo", "codigo_utilizador"),
    RawStatementStep("tb_resultados_finais", "Codigo_Utilizador"),
    RawStatementStep("tb_tipos_propinas", "Codigo_Utilizador"),
    ModelDeletionStep(TbDeclaracaoSemNota.Codigo_Utilizadores),
    RawStatementStep("tb_entrada_valores", "CodigoUtilizador"),
    RawStatementStep("tb_entrega_declarcoes", "Codigo_Utilizador"),

    # 5. 소유 엔티티 자체 (다른 사용자가 등록한 입학/학생 포함)와 나머지 직접 참조
    ModelDeletionStep(TbConfirmacoes.codigo_Utilizador),
    ModelDeletionStep(TbMatriculas.codigo_Aluno, ReferenceKind.VIA_STUDENT),
    ModelDeletionStep(TbMatriculas.codigo_Utilizador),
    ModelDeletionStep(TbAlunos.codigo_Encarregado, ReferenceKind.VIA_GUARDIAN),
    ModelDeletionStep(TbAlunos.codigo_Utilizador),
    ModelDeletionStep(TbEncarregados.codigo_Utilizador),
    ModelDeletionStep(TbDocente.codigo_Utilizador),
)


def check_graph_order(graph: Sequence[DeletionStep]) -> None:
    """
    그래프 순서 검증

    - 외래키로 참조되는 테이블의 단계가 참조하는 테이블의 단계보다 먼저 나오면 안 됩니다.
    - via_X 단계는 X 테이블 자체를 삭제하는 단계보다 먼저 나와야 합니다.
    - 루트 테이블은 그래프에 포함될 수 없습니다.

    Raises:
        ValueError: 순서 위반 목록
    """

    positions: Dict[str, List[int]] = defaultdict(list)
    for index, step in enumerate(graph):
        positions[step.table].append(index)

    errors = []

    if ROOT_TABLE in positions:
        errors.append(f"루트 테이블 {ROOT_TABLE}은 그래프에 포함될 수 없습니다 (항상 마지막에 삭제).")

    for index, step in enumerate(graph):
        for referenced in step.referenced_tables():
            if referenced == step.table:
                continue
            earlier = [i for i in positions.get(referenced, []) if i < index]
            if earlier:
                errors.append(
                    f"{step.label}(#{index})는 자신이 참조하는 {referenced}(#{earlier[0]})보다 먼저 삭제되어야 합니다."
                )

        if step.reference != ReferenceKind.DIRECT:
            owner_table = OWNED_ENTITIES[step.reference].table
            earlier = [i for i in positions.get(owner_table, []) if i < index]
            if earlier:
                errors.append(
                    f"{step.label}(#{index})는 소유 엔티티 {owner_table}(#{earlier[0]})보다 먼저 삭제되어야 합니다."
                )

    if errors:
        raise ValueError("삭제 그래프 순서 오류:\n" + "\n".join(errors))
