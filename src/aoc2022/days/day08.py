"""Solver canônico: day08, Treetop Tree House.

Gramática: grade retangular de dígitos (alturas das árvores).

Partes:
- part_1: árvores visíveis de fora da grade ao longo de linha ou coluna
- part_2: maior scenic score (produto das distâncias de visão nas quatro
  direções)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import numpy as np

from aoc2022.core.pipeline.step import Solver
from aoc2022.utils.grid import parse_digit_grid


def _visible_from_left(heights: np.ndarray) -> np.ndarray:
    tallest = np.maximum.accumulate(heights, axis=1)
    before = np.full_like(heights, -1)
    before[:, 1:] = tallest[:, :-1]
    return heights > before


def visibility(heights: np.ndarray) -> np.ndarray:
    """Máscara booleana das árvores visíveis de pelo menos uma borda."""
    left = _visible_from_left(heights)
    right = _visible_from_left(heights[:, ::-1])[:, ::-1]
    top = _visible_from_left(heights.T).T
    bottom = _visible_from_left(heights[::-1, :].T).T[::-1, :]
    return left | right | top | bottom


def _viewing_distance(height: int, line: Sequence[int]) -> int:
    seen = 0
    for h in line:
        seen += 1
        if h >= height:
            break
    return seen


def scenic_score(rows: List[List[int]], r: int, c: int) -> int:
    height = rows[r][c]
    column = [row[c] for row in rows]
    return (
        _viewing_distance(height, rows[r][c - 1::-1] if c else [])
        * _viewing_distance(height, rows[r][c + 1:])
        * _viewing_distance(height, column[r - 1::-1] if r else [])
        * _viewing_distance(height, column[r + 1:])
    )


@dataclass
class TreetopTreeHouse(Solver):
    id: str = "day08"
    day: int = 8
    title: str = "Treetop Tree House"

    def parse(self, text: str) -> np.ndarray:
        grid = parse_digit_grid(text)
        grid.setflags(write=False)
        return grid

    def part_1(self, puzzle: np.ndarray, params: Dict[str, Any]) -> int:
        return int(visibility(puzzle).sum())

    def part_2(self, puzzle: np.ndarray, params: Dict[str, Any]) -> int:
        rows = puzzle.tolist()
        height, width = puzzle.shape
        return max(scenic_score(rows, r, c) for r in range(height) for c in range(width))
