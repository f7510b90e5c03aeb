"""Solver canônico: day09, Rope Bridge.

Gramática: `<U|D|L|R> <n>` por linha.

A cabeça da corda anda um passo por vez; cada nó seguinte, quando deixa de
tocar o anterior (inclusive na diagonal), dá um passo na direção dele.

Partes (resposta = posições distintas visitadas pelo último nó):
- part_1: corda de 2 nós
- part_2: corda de 10 nós
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Set, Tuple

from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.parsing import match_line, numbered_lines


Motion = Tuple[str, int]
Position = Tuple[int, int]

_MOTION = re.compile(r"([UDLR]) ([0-9]+)")

STEPS: Dict[str, Position] = {"U": (0, 1), "D": (0, -1), "L": (-1, 0), "R": (1, 0)}


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def _follow(knot: Position, leader: Position) -> Position:
    dx, dy = leader[0] - knot[0], leader[1] - knot[1]
    if abs(dx) <= 1 and abs(dy) <= 1:
        return knot
    return knot[0] + _sign(dx), knot[1] + _sign(dy)


def tail_positions(motions: Tuple[Motion, ...], knots: int) -> Set[Position]:
    rope: List[Position] = [(0, 0)] * knots
    visited: Set[Position] = {rope[-1]}
    for direction, count in motions:
        sx, sy = STEPS[direction]
        for _ in range(count):
            rope[0] = (rope[0][0] + sx, rope[0][1] + sy)
            for i in range(1, knots):
                moved = _follow(rope[i], rope[i - 1])
                if moved == rope[i]:
                    break
                rope[i] = moved
            visited.add(rope[-1])
    return visited


@dataclass
class RopeBridge(Solver):
    id: str = "day09"
    day: int = 9
    title: str = "Rope Bridge"

    def parse(self, text: str) -> Tuple[Motion, ...]:
        motions = []
        for no, line in numbered_lines(text):
            m = match_line(_MOTION, line, line_no=no, expected="<U|D|L|R> <n>")
            motions.append((m.group(1), int(m.group(2))))
        return tuple(motions)

    def part_1(self, puzzle: Tuple[Motion, ...], params: Dict[str, Any]) -> int:
        return len(tail_positions(puzzle, int(params.get("knots_part1", 2))))

    def part_2(self, puzzle: Tuple[Motion, ...], params: Dict[str, Any]) -> int:
        return len(tail_positions(puzzle, int(params.get("knots_part2", 10))))
