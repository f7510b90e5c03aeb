"""Solver canônico: day13, Distress Signal.

Gramática: pares de pacotes (listas aninhadas de inteiros), uma linha por
pacote, pares separados por linha em branco.

Ordenação:
- inteiros comparam numericamente
- listas comparam elemento a elemento e depois pelo comprimento
- inteiro contra lista: o inteiro é envolvido em uma lista

Partes:
- part_1: soma dos índices (1-based) dos pares já em ordem
- part_2: produto das posições (1-based) dos divisores `[[2]]` e `[[6]]`
  após ordenar todos os pacotes
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Dict, List, Tuple, Union

from aoc2022.core.exceptions import InputParseError
from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.parsing import blocks


Packet = Union[int, List["Packet"]]
Pair = Tuple[Packet, Packet]

DIVIDERS: Tuple[Packet, Packet] = ([[2]], [[6]])


def _validate(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, list) and all(_validate(v) for v in value)


def parse_packet(line: str) -> Packet:
    try:
        value = json.loads(line)
    except json.JSONDecodeError:
        raise InputParseError(message=f"Pacote malformado: {line!r}", details={"line": line}) from None
    if not isinstance(value, list) or not _validate(value):
        raise InputParseError(
            message=f"Pacote deve ser lista aninhada de inteiros: {line!r}",
            details={"line": line},
        )
    return value


def compare(left: Packet, right: Packet) -> int:
    """-1 se em ordem, 1 se fora de ordem, 0 se indistinguíveis."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for a, b in zip(left, right):
        result = compare(a, b)
        if result:
            return result
    return (len(left) > len(right)) - (len(left) < len(right))


@dataclass
class DistressSignal(Solver):
    id: str = "day13"
    day: int = 13
    title: str = "Distress Signal"

    def parse(self, text: str) -> Tuple[Pair, ...]:
        pairs = []
        for i, block in enumerate(blocks(text), start=1):
            if len(block) != 2:
                raise InputParseError(
                    message=f"Par {i} deve ter 2 pacotes, tem {len(block)}",
                    details={"pair": i, "packets": len(block)},
                )
            pairs.append((parse_packet(block[0]), parse_packet(block[1])))
        if not pairs:
            raise InputParseError(message="Entrada não contém nenhum par de pacotes", details={"pairs": 0})
        return tuple(pairs)

    def part_1(self, puzzle: Tuple[Pair, ...], params: Dict[str, Any]) -> int:
        return sum(i for i, (left, right) in enumerate(puzzle, start=1) if compare(left, right) < 0)

    def part_2(self, puzzle: Tuple[Pair, ...], params: Dict[str, Any]) -> int:
        packets = [p for pair in puzzle for p in pair] + list(DIVIDERS)
        ordered = sorted(packets, key=cmp_to_key(compare))
        first = next(i for i, p in enumerate(ordered, start=1) if p is DIVIDERS[0])
        second = next(i for i, p in enumerate(ordered, start=1) if p is DIVIDERS[1])
        return first * second
