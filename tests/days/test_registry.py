# tests/days/test_registry.py
"""
Testes do registro padrão de solvers.
"""

import numpy as np
import pytest

from aoc2022.core.pipeline.step import Solver
from aoc2022.days import build_registry, default_solvers


def test_registry_covers_days_1_to_15():
    registry = build_registry()
    assert registry.days() == list(range(1, 16))
    assert [s.id for s in registry.list()] == [f"day{d:02d}" for d in range(1, 16)]


def test_every_solver_follows_protocol():
    for solver in default_solvers():
        assert isinstance(solver, Solver)
        assert solver.title


def test_every_example_parses(example_text):
    for solver in default_solvers():
        assert solver.parse(example_text(solver.day)) is not None


def _same_record(a, b) -> bool:
    if isinstance(a, np.ndarray):
        return isinstance(b, np.ndarray) and bool(np.array_equal(a, b))
    return a == b


@pytest.mark.parametrize("solver", default_solvers(), ids=lambda s: s.id)
def test_parse_twice_gives_equal_records(solver, example_text):
    """Parse é determinístico: a mesma entrada produz registros iguais por valor."""
    text = example_text(solver.day)
    assert _same_record(solver.parse(text), solver.parse(text))
