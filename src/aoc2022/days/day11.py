"""Solver canônico: day11, Monkey in the Middle.

Gramática (um bloco por macaco, blocos separados por linha em branco):
    Monkey 0:
      Starting items: 79, 98
      Operation: new = old * 19
      Test: divisible by 23
        If true: throw to monkey 2
        If false: throw to monkey 3

Partes (resposta = produto das duas maiores contagens de inspeção):
- part_1: `rounds_part1` rodadas (20); a preocupação é dividida por 3 após
  cada inspeção
- part_2: `rounds_part2` rodadas (10000); sem divisão, a preocupação é mantida
  módulo o MMC dos divisores para não crescer sem limite
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from aoc2022.core.exceptions import InputParseError
from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.parsing import blocks


ROUNDS_PART1 = 20
ROUNDS_PART2 = 10_000
RELIEF = 3

_HEADER = re.compile(r"Monkey ([0-9]+):")
_ITEMS = re.compile(r"Starting items:\s*([0-9]+(?:,\s*[0-9]+)*)")
_OPERATION = re.compile(r"Operation: new = old ([+*]) (old|[0-9]+)")
_TEST = re.compile(r"Test: divisible by ([0-9]+)")
_IF_TRUE = re.compile(r"If true: throw to monkey ([0-9]+)")
_IF_FALSE = re.compile(r"If false: throw to monkey ([0-9]+)")


@dataclass(frozen=True)
class Monkey:
    index: int
    items: Tuple[int, ...]
    operator: str
    operand: Optional[int]  # None => "old"
    divisor: int
    if_true: int
    if_false: int

    def inspect(self, worry: int) -> int:
        value = worry if self.operand is None else self.operand
        return worry + value if self.operator == "+" else worry * value

    def target(self, worry: int) -> int:
        return self.if_true if worry % self.divisor == 0 else self.if_false


def _parse_monkey(block: List[str], position: int) -> Monkey:
    patterns = (_HEADER, _ITEMS, _OPERATION, _TEST, _IF_TRUE, _IF_FALSE)
    if len(block) != len(patterns):
        raise InputParseError(
            message=f"Bloco do macaco {position} deve ter {len(patterns)} linhas, tem {len(block)}",
            details={"block": position, "lines": len(block)},
        )
    matches = []
    for pattern, line in zip(patterns, block):
        m = pattern.fullmatch(line)
        if m is None:
            raise InputParseError(
                message=f"Linha inválida no bloco do macaco {position}: {line!r}",
                details={"block": position, "line": line},
            )
        matches.append(m)

    header, items, operation, test, if_true, if_false = matches
    operand = operation.group(2)
    divisor = int(test.group(1))
    if divisor == 0:
        raise InputParseError(message=f"Divisor zero no macaco {position}", details={"block": position})
    return Monkey(
        index=int(header.group(1)),
        items=tuple(int(v) for v in items.group(1).split(",")),
        operator=operation.group(1),
        operand=None if operand == "old" else int(operand),
        divisor=divisor,
        if_true=int(if_true.group(1)),
        if_false=int(if_false.group(1)),
    )


def monkey_business(monkeys: Tuple[Monkey, ...], *, rounds: int, relief: bool) -> int:
    held = [list(m.items) for m in monkeys]
    inspected = [0] * len(monkeys)
    modulus = math.lcm(*(m.divisor for m in monkeys))

    for _ in range(rounds):
        for m in monkeys:
            items, held[m.index] = held[m.index], []
            inspected[m.index] += len(items)
            for worry in items:
                worry = m.inspect(worry)
                if relief:
                    worry //= RELIEF
                else:
                    worry %= modulus
                held[m.target(worry)].append(worry)

    top = sorted(inspected, reverse=True)[:2]
    return math.prod(top)


@dataclass
class MonkeyInTheMiddle(Solver):
    id: str = "day11"
    day: int = 11
    title: str = "Monkey in the Middle"

    def parse(self, text: str) -> Tuple[Monkey, ...]:
        monkeys = tuple(_parse_monkey(block, i) for i, block in enumerate(blocks(text)))
        if not monkeys:
            raise InputParseError(message="Entrada não contém nenhum macaco", details={"monkeys": 0})
        for i, m in enumerate(monkeys):
            if m.index != i:
                raise InputParseError(
                    message=f"Macacos fora de ordem: esperado {i}, encontrado {m.index}",
                    details={"expected": i, "found": m.index},
                )
            for target in (m.if_true, m.if_false):
                if not 0 <= target < len(monkeys) or target == i:
                    raise InputParseError(
                        message=f"Macaco {i} arremessa para macaco inválido {target}",
                        details={"monkey": i, "target": target, "monkeys": len(monkeys)},
                    )
        return monkeys

    def part_1(self, puzzle: Tuple[Monkey, ...], params: Dict[str, Any]) -> int:
        rounds = int(params.get("rounds_part1", ROUNDS_PART1))
        return monkey_business(puzzle, rounds=rounds, relief=True)

    def part_2(self, puzzle: Tuple[Monkey, ...], params: Dict[str, Any]) -> int:
        rounds = int(params.get("rounds_part2", ROUNDS_PART2))
        return monkey_business(puzzle, rounds=rounds, relief=False)
