"""Solver canônico: day10, Cathode-Ray Tube.

Gramática:
- `noop`: 1 ciclo, sem efeito
- `addx V`: 2 ciclos; X muda somente ao fim do segundo ciclo

O registrador X começa em 1.

Partes:
- part_1: soma das forças de sinal (ciclo * X durante o ciclo) nos ciclos
  20, 60, 100, ... enquanto o programa estiver em execução
- part_2: imagem do CRT 40x6; o pixel da coluna `c` acende (`#`) quando o
  sprite `X-1..X+1` cobre `c`, senão fica apagado (`.`)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.parsing import match_line, numbered_lines


# (opcode, argumento) com argumento None para noop
Instruction = Tuple[str, Optional[int]]

_INSTRUCTION = re.compile(r"noop|addx (-?[0-9]+)")

FIRST_SAMPLE = 20
SAMPLE_EVERY = 40
CRT_WIDTH = 40


def register_values(program: Tuple[Instruction, ...]) -> List[int]:
    """Valor de X *durante* cada ciclo; o índice 0 corresponde ao ciclo 1."""
    x = 1
    values: List[int] = []
    for op, arg in program:
        if op == "noop":
            values.append(x)
        else:
            values.extend((x, x))
            x += arg
    return values


def render_crt(values: List[int], width: int = CRT_WIDTH) -> str:
    pixels = ["#" if abs(x - i % width) <= 1 else "." for i, x in enumerate(values)]
    return "\n".join("".join(pixels[i:i + width]) for i in range(0, len(pixels), width))


@dataclass
class CathodeRayTube(Solver):
    id: str = "day10"
    day: int = 10
    title: str = "Cathode-Ray Tube"

    def parse(self, text: str) -> Tuple[Instruction, ...]:
        program: List[Instruction] = []
        for no, line in numbered_lines(text):
            m = match_line(_INSTRUCTION, line, line_no=no, expected="noop | addx V")
            program.append(("noop", None) if m.group(1) is None else ("addx", int(m.group(1))))
        return tuple(program)

    def part_1(self, puzzle: Tuple[Instruction, ...], params: Dict[str, Any]) -> int:
        values = register_values(puzzle)
        return sum(cycle * values[cycle - 1] for cycle in range(FIRST_SAMPLE, len(values) + 1, SAMPLE_EVERY))

    def part_2(self, puzzle: Tuple[Instruction, ...], params: Dict[str, Any]) -> str:
        return render_crt(register_values(puzzle))
