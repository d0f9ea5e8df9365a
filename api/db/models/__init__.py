"""
레거시 학사 관리 데이터베이스 모델 패키지
삭제 엔진이 구조화된 접근(ORM 매핑)으로 다루는 tb_* 테이블들을 정의합니다.
"""

# 사용자 관련 모델들
from .users import (
    TbTiposUtilizador,
    TbUtilizadores,
    TbItemPermissaoUtilizador,
    TbPermissaoTurmaUtilizador,
    TbAcessosSistema,
)

# 학생/입학 관련 모델들
from .students import TbEncarregados, TbAlunos, TbMatriculas, TbPreConfirmacao, TbConfirmacoes

# 학사 관련 모델들
from .academic import (
    TbDocente,
    TbGradeCurricular,
    TbDeclaracaoNotas,
    TbDeclaracaoSemNota,
    TbFaltas,
    TbMerito,
    TbProcessosDisciplinar,
    TbComportamento,
)

# 재무 관련 모델들
from .finance import (
    TbPagamentos,
    TbPropinaClasse,
    TbAnulacoes,
    TbNotaCredito,
    TbServicoAluno,
    TbContaAluno,
    TbDepositoValor,
)

__all__ = [
    # 사용자 관련 모델들
    "TbTiposUtilizador",
    "TbUtilizadores",
    "TbItemPermissaoUtilizador",
    "TbPermissaoTurmaUtilizador",
    "TbAcessosSistema",

    # 학생/입학 관련 모델들
    "TbEncarregados",
    "TbAlunos",
    "TbMatriculas",
    "TbPreConfirmacao",
    "TbConfirmacoes",

    # 학사 관련 모델들
    "TbDocente",
    "TbGradeCurricular",
    "TbDeclaracaoNotas",
    "TbDeclaracaoSemNota",
    "TbFaltas",
    "TbMerito",
    "TbProcessosDisciplinar",
    "TbComportamento",

    # 재무 관련 모델들
    "TbPagamentos",
    "TbPropinaClasse",
    "TbAnulacoes",
    "TbNotaCredito",
    "TbServicoAluno",
    "TbContaAluno",
    "TbDepositoValor",
]
