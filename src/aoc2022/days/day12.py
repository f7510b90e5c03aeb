"""Solver canônico: day12, Hill Climbing Algorithm.

Gramática: grade de letras minúsculas com exatamente um `S` (elevação `a`)
e um `E` (elevação `z`). Um passo pode subir no máximo uma unidade de
elevação (descer é livre).

Partes:
- part_1: menor número de passos de S até E
- part_2: menor número de passos de qualquer célula `a` até E, calculado por
  uma única busca reversa a partir de E
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple

import numpy as np

from aoc2022.core.exceptions import InputParseError, NoSolutionFound
from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.grid import Cell, find_cells, neighbors4, parse_char_grid
from aoc2022.utils.shortest_path import bfs_distances, dijkstra


@dataclass(frozen=True, eq=False)
class Heightmap:
    elevation: np.ndarray
    start: Cell
    end: Cell

    # igualdade por valor da grade; ndarray não é hashable
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Heightmap):
            return NotImplemented
        return (
            self.start == other.start
            and self.end == other.end
            and bool(np.array_equal(self.elevation, other.elevation))
        )

    def climbable(self, cell: Cell) -> Iterator[Tuple[Cell, int]]:
        limit = self.elevation[cell] + 1
        for nxt in neighbors4(self.elevation.shape, cell):
            if self.elevation[nxt] <= limit:
                yield nxt, 1

    def descendable(self, cell: Cell) -> Iterator[Cell]:
        # caminho reverso: de onde seria possível chegar em `cell`
        floor = self.elevation[cell] - 1
        for nxt in neighbors4(self.elevation.shape, cell):
            if self.elevation[nxt] >= floor:
                yield nxt


def _unique(grid: np.ndarray, marker: str) -> Cell:
    cells = find_cells(grid, marker)
    if len(cells) != 1:
        raise InputParseError(
            message=f"Esperado exatamente um '{marker}', encontrados {len(cells)}",
            details={"marker": marker, "count": len(cells)},
        )
    return cells[0]


@dataclass
class HillClimbing(Solver):
    id: str = "day12"
    day: int = 12
    title: str = "Hill Climbing Algorithm"

    def parse(self, text: str) -> Heightmap:
        grid = parse_char_grid(text)
        start, end = _unique(grid, "S"), _unique(grid, "E")

        letters = grid.copy()
        letters[start] = "a"
        letters[end] = "z"
        invalid = sorted({str(ch) for ch in np.unique(letters) if not ("a" <= ch <= "z")})
        if invalid:
            raise InputParseError(
                message=f"Caracteres de elevação inválidos: {''.join(invalid)}",
                details={"invalid": invalid},
            )

        elevation = np.vectorize(ord)(letters).astype(np.int16) - ord("a")
        elevation.setflags(write=False)
        return Heightmap(elevation=elevation, start=start, end=end)

    def part_1(self, puzzle: Heightmap, params: Dict[str, Any]) -> int:
        steps = dijkstra(puzzle.start, lambda cell: cell == puzzle.end, puzzle.climbable)
        if steps is None:
            raise NoSolutionFound(message="Não há caminho de S até E", details={"start": list(puzzle.start), "end": list(puzzle.end)})
        return steps

    def part_2(self, puzzle: Heightmap, params: Dict[str, Any]) -> int:
        dist = bfs_distances(puzzle.end, puzzle.descendable)
        lowest = [d for cell, d in dist.items() if puzzle.elevation[cell] == 0]
        if not lowest:
            raise NoSolutionFound(message="Nenhuma célula 'a' alcança E", details={"end": list(puzzle.end)})
        return min(lowest)
