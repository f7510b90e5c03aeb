# tests/utils/test_grid.py
"""
Testes das grades numpy.
"""

import numpy as np
import pytest

from aoc2022.core.exceptions import InputParseError
from aoc2022.utils.grid import find_cells, neighbors4, parse_char_grid, parse_digit_grid


def test_parse_digit_grid():
    grid = parse_digit_grid("123\n456\n")
    assert grid.shape == (2, 3)
    assert grid.dtype == np.int8
    assert np.array_equal(grid, np.array([[1, 2, 3], [4, 5, 6]]))


def test_parse_digit_grid_rejects_non_digits():
    with pytest.raises(InputParseError) as info:
        parse_digit_grid("12\n3a\n")
    assert info.value.details["row"] == 2


def test_ragged_grid():
    with pytest.raises(InputParseError):
        parse_char_grid("abc\nab\n")


def test_empty_grid():
    with pytest.raises(InputParseError):
        parse_char_grid("\n\n")


def test_find_cells():
    grid = parse_char_grid("Sab\ncdE\n")
    assert find_cells(grid, "S") == [(0, 0)]
    assert find_cells(grid, "E") == [(1, 2)]
    assert find_cells(grid, "z") == []


def test_neighbors4_respects_bounds():
    assert sorted(neighbors4((2, 3), (0, 0))) == [(0, 1), (1, 0)]
    assert sorted(neighbors4((3, 3), (1, 1))) == [(0, 1), (1, 0), (1, 2), (2, 1)]


def test_parse_digit_grid_rejects_unicode_digits():
    with pytest.raises(InputParseError):
        parse_digit_grid("1²\n")
