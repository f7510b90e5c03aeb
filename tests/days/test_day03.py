# tests/days/test_day03.py
import pytest

from aoc2022.core.exceptions import InputParseError
from aoc2022.days.day03 import RucksackReorganization, priority


def test_example(example_text):
    solver = RucksackReorganization()
    sacks = solver.parse(example_text(3))
    assert solver.part_1(sacks, {}) == 157
    assert solver.part_2(sacks, {}) == 70


def test_priority():
    assert [priority(c) for c in "azAZ"] == [1, 26, 27, 52]


def test_odd_length_rucksack():
    with pytest.raises(InputParseError):
        RucksackReorganization().parse("abc\n")


def test_group_count_must_be_multiple_of_three():
    solver = RucksackReorganization()
    sacks = solver.parse("aa\nbb\n")
    with pytest.raises(InputParseError):
        solver.part_2(sacks, {})
