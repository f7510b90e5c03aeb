# tests/days/test_day12.py
import numpy as np
import pytest

from aoc2022.core.exceptions import InputParseError, NoSolutionFound
from aoc2022.days.day12 import Heightmap, HillClimbing


def test_example(example_text):
    solver = HillClimbing()
    hm = solver.parse(example_text(12))
    assert hm.start == (0, 0)
    assert hm.end == (2, 5)
    assert hm.elevation[hm.start] == 0
    assert hm.elevation[hm.end] == 25
    assert solver.part_1(hm, {}) == 31
    assert solver.part_2(hm, {}) == 29


def test_elevation_is_read_only(example_text):
    hm = HillClimbing().parse(example_text(12))
    with pytest.raises(ValueError):
        hm.elevation[0, 0] = 3


def test_small_grid():
    hm = HillClimbing().parse("SbcdE\n")
    assert np.array_equal(hm.elevation, np.array([[0, 1, 2, 3, 25]]))


def test_unreachable_end():
    solver = HillClimbing()
    hm = solver.parse("SaE\n")
    with pytest.raises(NoSolutionFound):
        solver.part_1(hm, {})


def test_missing_start():
    with pytest.raises(InputParseError):
        HillClimbing().parse("abE\n")


def test_invalid_character():
    with pytest.raises(InputParseError):
        HillClimbing().parse("S1E\n")


def test_heightmap_equality_by_value(example_text):
    solver = HillClimbing()
    a = solver.parse(example_text(12))
    b = solver.parse(example_text(12))
    assert a == b
    assert a != Heightmap(elevation=a.elevation, start=a.start, end=(0, 0))
    with pytest.raises(TypeError):
        hash(a)
