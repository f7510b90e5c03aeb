"""Solver canônico: day15, Beacon Exclusion Zone.

Gramática: `Sensor at x=a, y=b: closest beacon is at x=c, y=d` por linha.

Cada sensor cobre o losango (distância de Manhattan) até seu beacon mais
próximo.

Partes:
- part_1: posições da linha `row` que não podem conter beacon (beacons
  conhecidos nessa linha não contam)
- part_2: único ponto não coberto em `[0, search_max]²`; resposta
  `x * 4000000 + y`

Config esperada (exemplo):
days:
  day15:
    row: 2000000
    search_max: 4000000
    test:
      row: 10
      search_max: 20
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from aoc2022.core.exceptions import NoSolutionFound
from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.intervals import Interval, covered_length, first_gap, merge_intervals
from aoc2022.utils.parsing import match_line, numbered_lines


ROW = 2_000_000
SEARCH_MAX = 4_000_000
TUNING_MULTIPLIER = 4_000_000

_SENSOR = re.compile(
    r"Sensor at x=(-?[0-9]+), y=(-?[0-9]+): closest beacon is at x=(-?[0-9]+), y=(-?[0-9]+)"
)

Point = Tuple[int, int]


@dataclass(frozen=True)
class Sensor:
    x: int
    y: int
    beacon: Point

    @property
    def radius(self) -> int:
        return abs(self.x - self.beacon[0]) + abs(self.y - self.beacon[1])

    def covers(self, p: Point) -> bool:
        return abs(self.x - p[0]) + abs(self.y - p[1]) <= self.radius

    def row_coverage(self, row: int) -> Optional[Interval]:
        reach = self.radius - abs(self.y - row)
        if reach < 0:
            return None
        return self.x - reach, self.x + reach


def _row_intervals(sensors: Tuple[Sensor, ...], row: int) -> List[Interval]:
    return [iv for iv in (s.row_coverage(row) for s in sensors) if iv is not None]


def _boundary_candidates(sensors: Tuple[Sensor, ...]) -> Iterator[Point]:
    """Interseções das bordas externas (raio + 1) dos losangos."""
    # y = x + a (inclinação +1) e y = -x + b (inclinação -1)
    rising = set()
    falling = set()
    for s in sensors:
        r = s.radius + 1
        rising.update((s.y - s.x + r, s.y - s.x - r))
        falling.update((s.y + s.x + r, s.y + s.x - r))
    for a in sorted(rising):
        for b in sorted(falling):
            if (b - a) % 2 == 0:
                yield (b - a) // 2, (a + b) // 2


def find_distress_beacon(sensors: Tuple[Sensor, ...], search_max: int) -> Point:
    def free(p: Point) -> bool:
        return 0 <= p[0] <= search_max and 0 <= p[1] <= search_max and not any(s.covers(p) for s in sensors)

    corners = [(0, 0), (0, search_max), (search_max, 0), (search_max, search_max)]
    for p in list(_boundary_candidates(sensors)) + corners:
        if free(p):
            return p

    # ponto na borda da região de busca sem interseção de bordas
    for y in range(search_max + 1):
        x = first_gap(_row_intervals(sensors, y), 0, search_max)
        if x is not None:
            return x, y

    raise NoSolutionFound(
        message=f"Nenhum ponto livre em [0, {search_max}]²",
        details={"search_max": search_max, "sensors": len(sensors)},
    )


@dataclass
class BeaconExclusionZone(Solver):
    id: str = "day15"
    day: int = 15
    title: str = "Beacon Exclusion Zone"

    def parse(self, text: str) -> Tuple[Sensor, ...]:
        sensors = []
        for no, line in numbered_lines(text):
            sx, sy, bx, by = (int(g) for g in match_line(
                _SENSOR, line, line_no=no,
                expected="Sensor at x=a, y=b: closest beacon is at x=c, y=d").groups())
            sensors.append(Sensor(x=sx, y=sy, beacon=(bx, by)))
        return tuple(sensors)

    def part_1(self, puzzle: Tuple[Sensor, ...], params: Dict[str, Any]) -> int:
        row = int(params.get("row", ROW))
        intervals = merge_intervals(_row_intervals(puzzle, row))
        beacons = {s.beacon[0] for s in puzzle if s.beacon[1] == row}
        on_row = sum(1 for bx in beacons if any(lo <= bx <= hi for lo, hi in intervals))
        return covered_length(intervals) - on_row

    def part_2(self, puzzle: Tuple[Sensor, ...], params: Dict[str, Any]) -> int:
        search_max = int(params.get("search_max", SEARCH_MAX))
        x, y = find_distress_beacon(puzzle, search_max)
        return x * TUNING_MULTIPLIER + y
