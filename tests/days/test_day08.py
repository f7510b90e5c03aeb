# tests/days/test_day08.py
import numpy as np
import pytest

from aoc2022.core.exceptions import InputParseError
from aoc2022.days.day08 import TreetopTreeHouse, scenic_score, visibility


def test_example(example_text):
    solver = TreetopTreeHouse()
    grid = solver.parse(example_text(8))
    assert grid.shape == (5, 5)
    assert solver.part_1(grid, {}) == 21
    assert solver.part_2(grid, {}) == 8


def test_interior_visibility(example_text):
    grid = TreetopTreeHouse().parse(example_text(8))
    mask = visibility(grid)
    expected_interior = np.array(
        [
            [True, True, False],
            [True, False, True],
            [False, True, False],
        ]
    )
    assert np.array_equal(mask[1:-1, 1:-1], expected_interior)
    assert mask[0].all() and mask[-1].all() and mask[:, 0].all() and mask[:, -1].all()


def test_scenic_score(example_text):
    rows = TreetopTreeHouse().parse(example_text(8)).tolist()
    assert scenic_score(rows, 1, 2) == 4
    assert scenic_score(rows, 3, 2) == 8
    assert scenic_score(rows, 0, 0) == 0


def test_grid_is_read_only(example_text):
    grid = TreetopTreeHouse().parse(example_text(8))
    with pytest.raises(ValueError):
        grid[0, 0] = 9


def test_non_digit():
    with pytest.raises(InputParseError):
        TreetopTreeHouse().parse("12\n3x\n")
