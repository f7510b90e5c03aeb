"""Solver canônico: day14, Regolith Reservoir.

Gramática: caminhos de rocha `x,y -> x,y -> ...`, um por linha; cada segmento
deve ser horizontal ou vertical.

A areia cai a partir de (500, 0): tenta descer, depois diagonal esquerda,
depois diagonal direita; se nenhuma for possível, repousa.

Partes:
- part_1: unidades em repouso antes que a areia caia no abismo
- part_2: chão sólido em `max_y + 2`; unidades em repouso até bloquear a fonte
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Set, Tuple

from aoc2022.core.exceptions import InputParseError
from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.parsing import numbered_lines, parse_error


Point = Tuple[int, int]

SOURCE: Point = (500, 0)

_POINT = re.compile(r"([0-9]+),([0-9]+)")


@dataclass(frozen=True)
class Cave:
    rocks: FrozenSet[Point]
    max_y: int


def _segment(a: Point, b: Point) -> List[Point]:
    (x1, y1), (x2, y2) = a, b
    if x1 == x2:
        return [(x1, y) for y in range(min(y1, y2), max(y1, y2) + 1)]
    return [(x, y1) for x in range(min(x1, x2), max(x1, x2) + 1)]


def pour(cave: Cave, *, floor: bool) -> int:
    """Simula a queda da areia reaproveitando a trajetória do grão anterior."""
    blocked: Set[Point] = set(cave.rocks)
    floor_y = cave.max_y + 2
    path: List[Point] = [SOURCE]
    rested = 0
    while path:
        x, y = path[-1]
        if not floor and y > cave.max_y:
            break
        for nx in (x, x - 1, x + 1):
            nxt = (nx, y + 1)
            if nxt not in blocked and not (floor and y + 1 == floor_y):
                path.append(nxt)
                break
        else:
            blocked.add((x, y))
            rested += 1
            path.pop()
    return rested


@dataclass
class RegolithReservoir(Solver):
    id: str = "day14"
    day: int = 14
    title: str = "Regolith Reservoir"

    def parse(self, text: str) -> Cave:
        rocks: Set[Point] = set()
        for no, line in numbered_lines(text):
            points: List[Point] = []
            for token in line.split("->"):
                m = _POINT.fullmatch(token.strip())
                if m is None:
                    raise parse_error("Ponto inválido (esperado: x,y -> x,y)", line_no=no, line=line)
                points.append((int(m.group(1)), int(m.group(2))))
            for a, b in zip(points, points[1:]):
                if a[0] != b[0] and a[1] != b[1]:
                    raise parse_error("Segmento diagonal", line_no=no, line=line)
                rocks.update(_segment(a, b))
            if len(points) == 1:
                rocks.add(points[0])
        if not rocks:
            raise InputParseError(message="Nenhuma rocha na entrada", details={})
        return Cave(rocks=frozenset(rocks), max_y=max(y for _, y in rocks))

    def part_1(self, puzzle: Cave, params: Dict[str, Any]) -> int:
        return pour(puzzle, floor=False)

    def part_2(self, puzzle: Cave, params: Dict[str, Any]) -> int:
        return pour(puzzle, floor=True)
