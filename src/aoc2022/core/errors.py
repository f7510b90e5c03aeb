"""
aoc2022: Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do aoc2022.
Erros fazem parte do resultado de uma execução e devem ser:

- explícitos
- serializáveis
- acionáveis pelo operador

Nenhuma falha é silenciosa: uma parte que falha produz um resultado FAILED
cujo payload carrega um `AocErrorPayload`.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AocErrorPayload:
    """
    Erro de uma parte, como aparece no PartResult e no Manifest.

    `type` é um código do catálogo abaixo; `details` carrega o contexto
    do puzzle (linha, pilha, dia) e `hint` diz ao operador o que ajustar.
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Entrada
INPUT_NOT_FOUND = "INPUT_NOT_FOUND"
INPUT_PARSE_ERROR = "INPUT_PARSE_ERROR"

# Computação
SIMULATION_ERROR = "SIMULATION_ERROR"
NO_SOLUTION_FOUND = "NO_SOLUTION_FOUND"

# Engine / Execução
ENGINE_EXECUTION_ERROR = "ENGINE_EXECUTION_ERROR"
ENGINE_CONFIGURATION_ERROR = "ENGINE_CONFIGURATION_ERROR"


# Mapeamento nome-da-exceção -> código estável
EXCEPTION_TYPE_CODES: Dict[str, str] = {
    "InputNotFound": INPUT_NOT_FOUND,
    "InputParseError": INPUT_PARSE_ERROR,
    "SimulationError": SIMULATION_ERROR,
    "NoSolutionFound": NO_SOLUTION_FOUND,
    "EngineConfigurationError": ENGINE_CONFIGURATION_ERROR,
}


# Hint padrão por código, usado quando a exceção não traz um hint próprio
DEFAULT_HINTS: Dict[str, str] = {
    INPUT_NOT_FOUND: "Coloque o arquivo de entrada no data dir configurado ou ajuste `input.data_dir`.",
    INPUT_PARSE_ERROR: "Verifique se a entrada corresponde à gramática do dia (arquivo completo e sem edições manuais).",
    SIMULATION_ERROR: "A entrada é sintaticamente válida mas leva a um estado impossível da simulação.",
    NO_SOLUTION_FOUND: "A entrada não produz resposta para esta parte; confira se o arquivo é do dia correto.",
    ENGINE_CONFIGURATION_ERROR: "Revise a configuração e a seleção de dias antes de reexecutar.",
}


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def engine_execution_error(
    *,
    solver_id: Optional[str] = None,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Verifique o log de eventos da execução. Nenhum fallback é aplicado automaticamente.",
) -> AocErrorPayload:
    return AocErrorPayload(
        type=ENGINE_EXECUTION_ERROR,
        message=exc_message or "Falha inesperada durante a execução",
        details={
            "solver_id": solver_id,
            "exc_type": exc_type,
        },
        hint=hint,
    )
