"""Solver canônico: day02, Rock Paper Scissors.

Gramática: `<A|B|C> <X|Y|Z>` por linha.

Pontuação:
- forma: pedra 1, papel 2, tesoura 3
- resultado: derrota 0, empate 3, vitória 6

Partes:
- part_1: a segunda coluna é a nossa forma
- part_2: a segunda coluna é o resultado desejado (X perde, Y empata, Z vence)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.parsing import match_line, numbered_lines


# (coluna do oponente, segunda coluna), ambas 0..2
Round = Tuple[int, int]

_ROUND = re.compile(r"([ABC])\s+([XYZ])")


def _outcome_score(opponent: int, ours: int) -> int:
    # (ours - opponent) mod 3: 0 empate, 1 vitória, 2 derrota
    return {0: 3, 1: 6, 2: 0}[(ours - opponent) % 3]


@dataclass
class RockPaperScissors(Solver):
    id: str = "day02"
    day: int = 2
    title: str = "Rock Paper Scissors"

    def parse(self, text: str) -> Tuple[Round, ...]:
        rounds = []
        for no, line in numbered_lines(text):
            m = match_line(_ROUND, line, line_no=no, expected="<A|B|C> <X|Y|Z>")
            rounds.append((ord(m.group(1)) - ord("A"), ord(m.group(2)) - ord("X")))
        return tuple(rounds)

    def part_1(self, puzzle: Tuple[Round, ...], params: Dict[str, Any]) -> int:
        return sum(ours + 1 + _outcome_score(opp, ours) for opp, ours in puzzle)

    def part_2(self, puzzle: Tuple[Round, ...], params: Dict[str, Any]) -> int:
        total = 0
        for opp, outcome in puzzle:
            # outcome 0 perde, 1 empata, 2 vence
            ours = (opp + outcome - 1) % 3
            total += ours + 1 + 3 * outcome
        return total
