"""Solver canônico: day04, Camp Cleanup.

Gramática: `a-b,c-d` por linha, com `a <= b` e `c <= d`.

Partes:
- part_1: pares em que um intervalo contém o outro por completo
- part_2: pares que se sobrepõem
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.intervals import Interval, contains, overlaps
from aoc2022.utils.parsing import match_line, numbered_lines, parse_error


Pair = Tuple[Interval, Interval]

_PAIR = re.compile(r"([0-9]+)-([0-9]+),([0-9]+)-([0-9]+)")


@dataclass
class CampCleanup(Solver):
    id: str = "day04"
    day: int = 4
    title: str = "Camp Cleanup"

    def parse(self, text: str) -> Tuple[Pair, ...]:
        pairs = []
        for no, line in numbered_lines(text):
            a, b, c, d = (int(g) for g in match_line(_PAIR, line, line_no=no, expected="a-b,c-d").groups())
            if a > b or c > d:
                raise parse_error("Intervalo invertido", line_no=no, line=line)
            pairs.append(((a, b), (c, d)))
        return tuple(pairs)

    def part_1(self, puzzle: Tuple[Pair, ...], params: Dict[str, Any]) -> int:
        return sum(1 for x, y in puzzle if contains(x, y) or contains(y, x))

    def part_2(self, puzzle: Tuple[Pair, ...], params: Dict[str, Any]) -> int:
        return sum(1 for x, y in puzzle if overlaps(x, y))
