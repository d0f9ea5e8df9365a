"""삭제 그래프 구성/순서 테스트"""

import pytest

from db.models import TbAlunos, TbEncarregados, TbMatriculas, TbPagamentos, TbUtilizadores
from users.deletion.graph import (
    DELETION_GRAPH,
    OWNED_ENTITIES,
    AccessKind,
    ModelDeletionStep,
    RawStatementStep,
    ReferenceKind,
    check_graph_order,
)


class TestGraphDefinition:
    """정적 그래프 정의"""

    def test_graph_order_is_valid(self):
        check_graph_order(DELETION_GRAPH)

    def test_root_table_is_not_in_graph(self):
        assert all(step.table != TbUtilizadores.__tablename__ for step in DELETION_GRAPH)

    def test_owned_entities_are_deleted_by_graph(self):
        labels = {step.label for step in DELETION_GRAPH}
        assert "tb_matriculas.codigo_Utilizador" in labels
        assert "tb_alunos.codigo_Utilizador" in labels

    def test_owned_entities_registered_by_other_users_are_covered(self):
        steps = {(step.label, step.reference) for step in DELETION_GRAPH}
        assert ("tb_matriculas.codigo_Aluno", ReferenceKind.VIA_STUDENT) in steps
        assert ("tb_alunos.codigo_Encarregado", ReferenceKind.VIA_GUARDIAN) in steps

    def test_payments_matched_directly_and_via_student(self):
        payment_steps = [step for step in DELETION_GRAPH if step.table == "tb_pagamentos"]
        assert {step.reference for step in payment_steps} == {ReferenceKind.DIRECT, ReferenceKind.VIA_STUDENT}

    def test_legacy_tables_use_raw_statements(self):
        raw_tables = {step.table for step in DELETION_GRAPH if step.access == AccessKind.RAW}
        assert "tb_logs" in raw_tables
        assert "tb_notas_jur_econ_10_12" in raw_tables
        assert "tb_pagamentos" not in raw_tables

    def test_steps_are_unique(self):
        keys = [(step.table, step.column) for step in DELETION_GRAPH]
        assert len(keys) == len(set(keys))


class TestDescriptors:
    """기술자 생성"""

    def test_model_step_reads_table_and_column_from_attribute(self):
        step = ModelDeletionStep(TbPagamentos.codigo_Aluno, ReferenceKind.VIA_STUDENT)
        assert step.table == "tb_pagamentos"
        assert step.column == "codigo_Aluno"
        assert step.access == AccessKind.STRUCTURED
        assert step.referenced_tables() == {"tb_alunos", "tb_utilizadores"}

    def test_model_step_rejects_plain_column_name(self):
        with pytest.raises(TypeError):
            ModelDeletionStep("codigo_Aluno")

    def test_raw_step_has_no_known_references(self):
        step = RawStatementStep("tb_logs", "CodigoUtilizador")
        assert step.access == AccessKind.RAW
        assert step.referenced_tables() == frozenset()
        assert step.label == "tb_logs.CodigoUtilizador"

    def test_owned_entity_tables(self):
        assert OWNED_ENTITIES[ReferenceKind.VIA_GUARDIAN].table == "tb_encarregados"
        assert OWNED_ENTITIES[ReferenceKind.VIA_ENROLLMENT].table == "tb_matriculas"
        assert OWNED_ENTITIES[ReferenceKind.VIA_STUDENT].table == "tb_alunos"

    def test_owned_entities_are_ordered_parent_first(self):
        assert list(OWNED_ENTITIES) == [
            ReferenceKind.VIA_GUARDIAN,
            ReferenceKind.VIA_STUDENT,
            ReferenceKind.VIA_ENROLLMENT,
        ]


class TestCheckGraphOrder:
    """순서 검증 실패 케이스"""

    def test_dependency_before_dependent_is_rejected(self):
        graph = (
            ModelDeletionStep(TbAlunos.codigo_Utilizador),
            ModelDeletionStep(TbMatriculas.codigo_Utilizador),
        )
        with pytest.raises(ValueError, match="tb_matriculas"):
            check_graph_order(graph)

    def test_via_step_after_owner_is_rejected(self):
        graph = (
            ModelDeletionStep(TbAlunos.codigo_Utilizador),
            RawStatementStep("tb_conta_aluno_antiga", "Codigo_Aluno", ReferenceKind.VIA_STUDENT),
        )
        with pytest.raises(ValueError, match="소유 엔티티"):
            check_graph_order(graph)

    def test_root_table_in_graph_is_rejected(self):
        graph = (RawStatementStep("tb_utilizadores", "codigo"),)
        with pytest.raises(ValueError, match="루트"):
            check_graph_order(graph)

    def test_correct_order_passes(self):
        graph = (
            ModelDeletionStep(TbPagamentos.codigo_Aluno, ReferenceKind.VIA_STUDENT),
            ModelDeletionStep(TbMatriculas.codigo_Utilizador),
            ModelDeletionStep(TbAlunos.codigo_Utilizador),
        )
        check_graph_order(graph)

    def test_guardian_students_after_guardian_is_rejected(self):
        graph = (
            ModelDeletionStep(TbEncarregados.codigo_Utilizador),
            ModelDeletionStep(TbAlunos.codigo_Encarregado, ReferenceKind.VIA_GUARDIAN),
        )
        with pytest.raises(ValueError, match="소유 엔티티 tb_encarregados"):
            check_graph_order(graph)
