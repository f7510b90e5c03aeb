# tests/days/test_day15.py
import pytest

from aoc2022.core.exceptions import InputParseError, NoSolutionFound
from aoc2022.days.day15 import BeaconExclusionZone, Sensor, find_distress_beacon


EXAMPLE_PARAMS = {"row": 10, "search_max": 20}


def test_example(example_text):
    solver = BeaconExclusionZone()
    sensors = solver.parse(example_text(15))
    assert len(sensors) == 14
    assert sensors[6] == Sensor(x=8, y=7, beacon=(2, 10))
    assert sensors[6].radius == 9
    assert solver.part_1(sensors, EXAMPLE_PARAMS) == 26
    assert solver.part_2(sensors, EXAMPLE_PARAMS) == 56000011


def test_distress_beacon_position(example_text):
    sensors = BeaconExclusionZone().parse(example_text(15))
    assert find_distress_beacon(sensors, 20) == (14, 11)


def test_fully_covered_area():
    sensors = (Sensor(x=5, y=5, beacon=(5, 25)),)
    with pytest.raises(NoSolutionFound):
        find_distress_beacon(sensors, 10)


def test_row_coverage():
    s = Sensor(x=8, y=7, beacon=(2, 10))
    assert s.row_coverage(7) == (-1, 17)
    assert s.row_coverage(16) == (8, 8)
    assert s.row_coverage(17) is None


def test_malformed_line():
    with pytest.raises(InputParseError):
        BeaconExclusionZone().parse("Sensor at x=2, y=18: beacon at x=-2, y=15\n")
