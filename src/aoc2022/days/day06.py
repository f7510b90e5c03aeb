"""Solver canônico: day06, Tuning Trouble.

Gramática: uma única linha de caracteres (o datastream).

Resposta: posição (1-based) do último caractere da primeira janela de N
caracteres distintos. N = 4 (start-of-packet) na part_1 e N = 14
(start-of-message) na part_2.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from aoc2022.core.exceptions import InputParseError, NoSolutionFound
from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.parsing import lines


PACKET_MARKER = 4
MESSAGE_MARKER = 14


def find_marker(stream: str, size: int) -> int:
    # contagem por caractere dentro da janela deslizante
    counts: Dict[str, int] = {}
    for i, ch in enumerate(stream):
        counts[ch] = counts.get(ch, 0) + 1
        if i >= size:
            old = stream[i - size]
            counts[old] -= 1
            if not counts[old]:
                del counts[old]
        if i >= size - 1 and len(counts) == size:
            return i + 1
    raise NoSolutionFound(
        message=f"Nenhuma janela de {size} caracteres distintos",
        details={"size": size, "length": len(stream)},
    )


@dataclass
class TuningTrouble(Solver):
    id: str = "day06"
    day: int = 6
    title: str = "Tuning Trouble"

    def parse(self, text: str) -> str:
        rows = lines(text)
        if len(rows) != 1:
            raise InputParseError(
                message=f"Esperada exatamente uma linha, encontradas {len(rows)}",
                details={"lines": len(rows)},
            )
        return rows[0]

    def part_1(self, puzzle: str, params: Dict[str, Any]) -> int:
        return find_marker(puzzle, PACKET_MARKER)

    def part_2(self, puzzle: str, params: Dict[str, Any]) -> int:
        return find_marker(puzzle, MESSAGE_MARKER)
