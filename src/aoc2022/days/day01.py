"""Solver canônico: day01, Calorie Counting.

Gramática:
- blocos de inteiros (um por linha), um bloco por elfo
- blocos separados por uma ou mais linhas em branco
- linhas em branco no início/fim são ignoradas; entrada vazia => nenhum elfo

Partes:
- part_1: maior total de calorias carregado por um elfo
- part_2: soma dos três maiores totais

Falhas:
- linha não inteira => InputParseError
- nenhum elfo => NoSolutionFound
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from aoc2022.core.exceptions import NoSolutionFound
from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.parsing import parse_int


Elves = Tuple[Tuple[int, ...], ...]


def _totals(elves: Elves) -> List[int]:
    if not elves:
        raise NoSolutionFound(message="Entrada não contém nenhum elfo", details={"elves": 0})
    return sorted((sum(e) for e in elves), reverse=True)


@dataclass
class CalorieCounting(Solver):
    """Totais de calorias por elfo."""

    id: str = "day01"
    day: int = 1
    title: str = "Calorie Counting"

    def parse(self, text: str) -> Elves:
        elves: List[Tuple[int, ...]] = []
        current: List[int] = []
        for no, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line:
                if current:
                    elves.append(tuple(current))
                    current = []
                continue
            current.append(parse_int(line, line_no=no, line=raw))
        if current:
            elves.append(tuple(current))
        return tuple(elves)

    def part_1(self, puzzle: Elves, params: Dict[str, Any]) -> int:
        return _totals(puzzle)[0]

    def part_2(self, puzzle: Elves, params: Dict[str, Any]) -> int:
        return sum(_totals(puzzle)[:3])
