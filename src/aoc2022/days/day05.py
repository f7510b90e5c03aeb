"""Solver canônico: day05, Supply Stacks.

Gramática:
- desenho das pilhas: `[X]` a cada 4 colunas (células vazias permitidas),
  seguido da linha com os números das pilhas
- uma linha em branco
- instruções `move N from A to B`

Partes:
- part_1 (CrateMover 9000): caixas movidas uma a uma (ordem invertida)
- part_2 (CrateMover 9001): caixas movidas em bloco (ordem preservada)

Resposta: a caixa do topo de cada pilha; `_` para pilha vazia.

Falhas:
- pilha inexistente ou mais caixas do que a pilha possui => SimulationError
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from aoc2022.core.exceptions import InputParseError, SimulationError
from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.parsing import match_line, parse_error


_SECTIONS = re.compile(r"\n[ \t]*\n")
_MOVE = re.compile(r"move ([0-9]+) from ([0-9]+) to ([0-9]+)")
_LABELS = re.compile(r"\s*[0-9]+(\s+[0-9]+)*\s*")


@dataclass(frozen=True)
class Move:
    count: int
    source: int
    target: int


@dataclass(frozen=True)
class Supplies:
    # cada pilha vai do fundo para o topo
    stacks: Tuple[Tuple[str, ...], ...]
    moves: Tuple[Move, ...]


def _parse_drawing(drawing: List[str]) -> Tuple[Tuple[str, ...], ...]:
    labels = drawing[-1]
    if not _LABELS.fullmatch(labels):
        raise parse_error("Linha de numeração das pilhas ausente", line_no=len(drawing), line=labels)
    count = len(labels.split())

    stacks: List[List[str]] = [[] for _ in range(count)]
    for no in range(len(drawing) - 2, -1, -1):
        row = drawing[no]
        for k in range(count):
            idx = 1 + 4 * k
            cell = row[idx - 1:idx + 2] if idx < len(row) else ""
            if not cell.strip():
                continue
            if len(cell) < 3 or cell[0] != "[" or cell[2] != "]" or not cell[1].strip():
                raise parse_error(f"Célula inválida na pilha {k + 1}", line_no=no + 1, line=row)
            stacks[k].append(cell[1])
        if len(row.rstrip()) > 4 * count:
            raise parse_error("Caixa fora das pilhas numeradas", line_no=no + 1, line=row)
    return tuple(tuple(s) for s in stacks)


def _simulate(supplies: Supplies, *, keep_order: bool) -> str:
    stacks = [list(s) for s in supplies.stacks]
    for i, mv in enumerate(supplies.moves, start=1):
        for pos in (mv.source, mv.target):
            if not 1 <= pos <= len(stacks):
                raise SimulationError(
                    message=f"Pilha {pos} não existe (instrução {i})",
                    details={"move": i, "stack": pos, "stacks": len(stacks)},
                )
        src, dst = stacks[mv.source - 1], stacks[mv.target - 1]
        if mv.count > len(src):
            raise SimulationError(
                message=f"Pilha {mv.source} tem {len(src)} caixas, instrução {i} move {mv.count}",
                details={"move": i, "stack": mv.source, "available": len(src), "requested": mv.count},
            )
        moved = src[len(src) - mv.count:]
        del src[len(src) - mv.count:]
        dst.extend(moved if keep_order else reversed(moved))
    return "".join(s[-1] if s else "_" for s in stacks)


@dataclass
class SupplyStacks(Solver):
    """Rearranjo de pilhas de caixas."""

    id: str = "day05"
    day: int = 5
    title: str = "Supply Stacks"

    def parse(self, text: str) -> Supplies:
        sections = _SECTIONS.split(text.strip("\n"), maxsplit=1)
        if len(sections) != 2:
            raise InputParseError(
                message="Esperado desenho das pilhas e instruções separados por linha em branco",
                details={"sections": len(sections)},
            )
        drawing = sections[0].split("\n")
        stacks = _parse_drawing(drawing)

        offset = len(drawing) + 1
        moves = []
        for no, raw in enumerate(sections[1].split("\n"), start=offset + 1):
            line = raw.strip()
            if not line:
                continue
            count, source, target = (int(g) for g in match_line(
                _MOVE, line, line_no=no, expected="move N from A to B").groups())
            moves.append(Move(count, source, target))

        return Supplies(stacks=stacks, moves=tuple(moves))

    def part_1(self, puzzle: Supplies, params: Dict[str, Any]) -> str:
        return _simulate(puzzle, keep_order=False)

    def part_2(self, puzzle: Supplies, params: Dict[str, Any]) -> str:
        return _simulate(puzzle, keep_order=True)
