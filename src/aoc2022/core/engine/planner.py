# src/aoc2022/core/engine/planner.py
"""
Planejador de execução de dias.

O planner opera exclusivamente em nível estrutural: valida identificadores
de solvers, resolve a seleção de dias pedida pelo operador e produz uma
ordem de execução determinística (crescente por número do dia).

Invariantes:
    - Todo dia selecionado aparece exatamente uma vez
    - A mesma seleção produz sempre a mesma ordem

Limites explícitos:
    - Não executa solvers
    - Não lê entradas
    - Não decide políticas de execução
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from aoc2022.core.pipeline.registry import DuplicateSolverIdError
from aoc2022.core.pipeline.step import Solver


class UnknownDayError(ValueError):
    """
    Exceção levantada quando a seleção referencia um dia sem solver.

    Dias inexistentes são tratados como erro estrutural antes de qualquer
    execução; nenhum dia é executado parcialmente.
    """


def plan_execution(
    solvers: Iterable[Solver],
    days: Optional[Iterable[int]] = None,
) -> List[Solver]:
    """
    Valida os solvers e produz a ordem de execução dos dias selecionados.

    Args:
        solvers: Solvers disponíveis.
        days: Dias pedidos pelo operador. `None` ou vazio seleciona todos.
            Repetições são ignoradas.

    Returns:
        List[Solver]: Solvers selecionados em ordem crescente de dia.

    Raises:
        ValueError: Se algum solver possuir `id` inválido.
        DuplicateSolverIdError: Se houver `id` ou `day` repetido.
        UnknownDayError: Se algum dia selecionado não possuir solver.
    """
    by_day: Dict[int, Solver] = {}
    seen_ids = set()
    for s in solvers:
        sid = getattr(s, "id", None)
        if not isinstance(sid, str) or not sid.strip():
            raise ValueError("solver.id must be a non-empty string")
        if sid in seen_ids:
            raise DuplicateSolverIdError(f"Duplicate solver id: {sid}")
        if s.day in by_day:
            raise DuplicateSolverIdError(f"Duplicate day {s.day}: {by_day[s.day].id} and {sid}")
        seen_ids.add(sid)
        by_day[s.day] = s

    selected = sorted(set(days or by_day.keys()))

    unknown = [d for d in selected if d not in by_day]
    if unknown:
        available = ", ".join(str(d) for d in sorted(by_day))
        raise UnknownDayError(
            f"No solver for day(s) {', '.join(str(d) for d in unknown)} (available: {available})"
        )

    return [by_day[d] for d in selected]
