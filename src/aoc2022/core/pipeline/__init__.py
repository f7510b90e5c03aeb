# src/aoc2022/core/pipeline/__init__.py
"""
# Pipeline Core (aoc2022)

Contratos canônicos e estruturas fundamentais da execução diária.

Cada dia é um pipeline linear `read → parse → compute → print`:
- o Engine lê a entrada via `RunContext`
- o `Solver` parseia o texto e calcula cada parte
- cada parte produz um `PartResult` imutável

## Componentes

- **types**: `DayPart`, `PartStatus`, `PartResult`
- **step**: `Solver` (Protocol)
- **context**: `RunContext` (entradas, parâmetros, artefatos, logs, warnings)
- **registry**: `SolverRegistry` (unicidade de `id` e de `day`)
"""

from .context import RunContext, new_run_context
from .registry import DuplicateSolverIdError, SolverRegistry
from .step import Solver
from .types import Answer, DayPart, PartResult, PartStatus

__all__ = [
    "RunContext",
    "new_run_context",
    "DuplicateSolverIdError",
    "SolverRegistry",
    "Solver",
    "Answer",
    "DayPart",
    "PartResult",
    "PartStatus",
]
