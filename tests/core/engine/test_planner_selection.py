# tests/core/engine/test_planner_selection.py
"""
Testes do planner: seleção e ordenação determinística de dias.
"""

import pytest

from aoc2022.core.engine.planner import UnknownDayError, plan_execution
from aoc2022.core.pipeline.registry import DuplicateSolverIdError


def test_all_days_sorted(DummySolver):
    solvers = [DummySolver(day=3), DummySolver(day=1), DummySolver(day=2)]
    assert [s.day for s in plan_execution(solvers)] == [1, 2, 3]


def test_selection_is_sorted_and_deduplicated(DummySolver):
    solvers = [DummySolver(day=d) for d in (1, 2, 3, 4)]
    order = plan_execution(solvers, days=[4, 2, 4])
    assert [s.id for s in order] == ["day02", "day04"]


def test_unknown_day(DummySolver):
    with pytest.raises(UnknownDayError) as info:
        plan_execution([DummySolver(day=1)], days=[1, 25])
    assert "25" in str(info.value)


def test_duplicate_day(DummySolver):
    with pytest.raises(DuplicateSolverIdError):
        plan_execution([DummySolver(day=1, solver_id="a"), DummySolver(day=1, solver_id="b")])


def test_duplicate_id(DummySolver):
    with pytest.raises(DuplicateSolverIdError):
        plan_execution([DummySolver(day=1, solver_id="x"), DummySolver(day=2, solver_id="x")])
