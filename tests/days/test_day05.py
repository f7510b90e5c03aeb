# tests/days/test_day05.py
import pytest

from aoc2022.core.exceptions import InputParseError, SimulationError
from aoc2022.days.day05 import Move, SupplyStacks


def test_example(example_text):
    solver = SupplyStacks()
    supplies = solver.parse(example_text(5))
    assert supplies.stacks == (("Z", "N"), ("M", "C", "D"), ("P",))
    assert supplies.moves[0] == Move(1, 2, 1)
    assert solver.part_1(supplies, {}) == "CMZ"
    assert solver.part_2(supplies, {}) == "MCD"


def test_parts_do_not_mutate_puzzle(example_text):
    solver = SupplyStacks()
    supplies = solver.parse(example_text(5))
    assert solver.part_1(supplies, {}) == solver.part_1(supplies, {})
    assert solver.part_2(supplies, {}) == "MCD"


def test_empty_stack_is_rendered_as_underscore():
    solver = SupplyStacks()
    supplies = solver.parse("[A]    \n 1   2 \n\nmove 1 from 1 to 2\n")
    assert solver.part_1(supplies, {}) == "_A"


def test_moving_more_than_available():
    solver = SupplyStacks()
    supplies = solver.parse("[A]\n 1 \n\nmove 2 from 1 to 1\n")
    with pytest.raises(SimulationError) as info:
        solver.part_1(supplies, {})
    assert info.value.details["available"] == 1


def test_unknown_stack():
    solver = SupplyStacks()
    supplies = solver.parse("[A]\n 1 \n\nmove 1 from 1 to 4\n")
    with pytest.raises(SimulationError):
        solver.part_2(supplies, {})


def test_missing_moves_section():
    with pytest.raises(InputParseError):
        SupplyStacks().parse("[A]\n 1 \n")
