# src/aoc2022/core/pipeline/registry.py
"""
Registro estrutural de Solvers.

O `SolverRegistry` valida, no momento do registro, que cada solver possui
um identificador válido e um número de dia único, preservando a ordem de
declaração.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .step import Solver


class DuplicateSolverIdError(ValueError):
    """
    Exceção levantada quando dois solvers compartilham `id` ou `day`.

    A duplicidade é tratada como erro fatal de configuração, detectado antes
    de qualquer execução. Nenhum registro parcial é aceito.
    """


@dataclass
class SolverRegistry:
    """Registro canônico de Solvers, indexado por `id` e por `day`."""

    _solvers: Dict[str, Solver] = field(default_factory=dict, init=False, repr=False)
    _by_day: Dict[int, str] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, solver: Solver) -> None:
        solver_id = getattr(solver, "id", None)
        if not isinstance(solver_id, str) or not solver_id.strip():
            raise ValueError("solver.id must be a non-empty string")

        day = getattr(solver, "day", None)
        if not isinstance(day, int) or isinstance(day, bool) or day < 1:
            raise ValueError(f"solver.day must be a positive int: {solver_id}")

        if solver_id in self._solvers:
            raise DuplicateSolverIdError(f"Duplicate solver id: {solver_id}")
        if day in self._by_day:
            raise DuplicateSolverIdError(
                f"Duplicate day {day}: {self._by_day[day]} and {solver_id}"
            )

        self._solvers[solver_id] = solver
        self._by_day[day] = solver_id
        self._order.append(solver_id)

    def get(self, solver_id: str) -> Solver:
        return self._solvers[solver_id]

    def for_day(self, day: int) -> Solver:
        return self._solvers[self._by_day[day]]

    def days(self) -> List[int]:
        return sorted(self._by_day)

    def list(self) -> List[Solver]:
        return [self._solvers[sid] for sid in self._order]
