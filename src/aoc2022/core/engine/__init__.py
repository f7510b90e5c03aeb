# src/aoc2022/core/engine/__init__.py
"""
Engine do aoc2022.

Componentes principais:
    - planner → seleção e ordenação determinística dos dias
    - engine  → execução coordenada de solvers com políticas explícitas

Invariantes:
    - Cada dia é lido e parseado no máximo uma vez por run
    - O resultado da execução reflete explicitamente o estado de cada parte
"""

from .engine import Engine, RunResult
from .planner import UnknownDayError, plan_execution

__all__ = ["Engine", "RunResult", "UnknownDayError", "plan_execution"]
