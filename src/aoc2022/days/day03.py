"""Solver canônico: day03, Rucksack Reorganization.

Gramática: uma mochila por linha, apenas letras, comprimento par.

Prioridades: a-z => 1-26, A-Z => 27-52.

Partes:
- part_1: soma das prioridades do item presente nos dois compartimentos
- part_2: grupos de três mochilas consecutivas; soma das prioridades do
  crachá (único item comum ao grupo)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from aoc2022.core.exceptions import InputParseError, NoSolutionFound
from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.parsing import common_items, match_line, numbered_lines, parse_error, single


_RUCKSACK = re.compile(r"[a-zA-Z]+")


def priority(item: str) -> int:
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    return ord(item) - ord("A") + 27


def _single_common(groups: Sequence[str], *, where: Dict[str, Any]) -> str:
    item = single(common_items(groups))
    if item is None:
        raise NoSolutionFound(
            message="Esperado exatamente um item em comum",
            details={**where, "common": common_items(groups)},
        )
    return item


@dataclass
class RucksackReorganization(Solver):
    id: str = "day03"
    day: int = 3
    title: str = "Rucksack Reorganization"

    def parse(self, text: str) -> Tuple[str, ...]:
        sacks = []
        for no, line in numbered_lines(text):
            match_line(_RUCKSACK, line, line_no=no, expected="letras a-z/A-Z")
            if len(line) % 2:
                raise parse_error("Mochila com número ímpar de itens", line_no=no, line=line)
            sacks.append(line)
        return tuple(sacks)

    def part_1(self, puzzle: Tuple[str, ...], params: Dict[str, Any]) -> int:
        total = 0
        for i, sack in enumerate(puzzle):
            half = len(sack) // 2
            total += priority(_single_common([sack[:half], sack[half:]], where={"rucksack": i + 1}))
        return total

    def part_2(self, puzzle: Tuple[str, ...], params: Dict[str, Any]) -> int:
        if len(puzzle) % 3:
            raise InputParseError(
                message=f"Número de mochilas ({len(puzzle)}) não é múltiplo de 3",
                details={"rucksacks": len(puzzle)},
            )
        total = 0
        for g in range(0, len(puzzle), 3):
            total += priority(_single_common(puzzle[g:g + 3], where={"group": g // 3 + 1}))
        return total
