# tests/utils/test_intervals.py
"""
Testes dos intervalos inteiros fechados.
"""

from aoc2022.utils.intervals import contains, covered_length, first_gap, merge_intervals, overlaps


def test_merge_overlapping_and_adjacent():
    assert merge_intervals([(5, 8), (1, 3), (4, 4), (10, 12), (11, 11)]) == [(1, 8), (10, 12)]


def test_covered_length():
    assert covered_length([(-2, 2), (2, 24), (12, 12)]) == 27
    assert covered_length([]) == 0


def test_first_gap():
    assert first_gap([(0, 10), (12, 20)], 0, 20) == 11
    assert first_gap([(0, 20)], 0, 20) is None
    assert first_gap([(3, 5)], 0, 20) == 0
    assert first_gap([(-5, 4), (5, 9)], 0, 20) == 10
    assert first_gap([], 4, 6) == 4


def test_contains_and_overlaps():
    assert contains((2, 8), (3, 7))
    assert not contains((3, 7), (2, 8))
    assert overlaps((5, 7), (7, 9))
    assert not overlaps((2, 4), (6, 8))
