# tests/days/test_day07.py
import pytest

from aoc2022.core.exceptions import InputParseError, NoSolutionFound, SimulationError
from aoc2022.days.day07 import NoSpaceLeft, dir_sizes


def test_example(example_text):
    solver = NoSpaceLeft()
    root = solver.parse(example_text(7))
    sizes = dir_sizes(root)
    assert sizes["/a/e"] == 584
    assert sizes["/a"] == 94853
    assert sizes["/d"] == 24933642
    assert sizes["/"] == 48381165
    assert solver.part_1(root, {}) == 95437
    assert solver.part_2(root, {}) == 24933642


def test_params_override_limits(example_text):
    solver = NoSpaceLeft()
    root = solver.parse(example_text(7))
    assert solver.part_1(root, {"max_dir_size": 1000}) == 584


def test_repeated_listing_does_not_double_count():
    solver = NoSpaceLeft()
    root = solver.parse("$ cd /\n$ ls\n10 a\n$ ls\n10 a\n")
    assert dir_sizes(root)["/"] == 10


def test_cd_above_root():
    with pytest.raises(SimulationError):
        NoSpaceLeft().parse("$ cd /\n$ cd ..\n")


def test_unknown_line():
    with pytest.raises(InputParseError):
        NoSpaceLeft().parse("$ cd /\n$ rm -rf x\n")


def test_nothing_to_delete():
    solver = NoSpaceLeft()
    root = solver.parse("$ cd /\n$ ls\n10 a\n")
    with pytest.raises(NoSolutionFound):
        solver.part_2(root, {})
