# src/aoc2022/utils/grid.py
"""Grades retangulares baseadas em numpy."""

from __future__ import annotations

from typing import Iterator, List, Tuple

import numpy as np

from aoc2022.core.exceptions import InputParseError

from .parsing import lines


Cell = Tuple[int, int]

DIRECTIONS_4: Tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _rows(text: str) -> List[str]:
    rows = lines(text)
    if not rows:
        raise InputParseError(message="Grade vazia", details={})
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise InputParseError(
                message=f"Grade não retangular: linha {i + 1} tem {len(row)} colunas, esperado {width}",
                details={"row": i + 1, "width": len(row), "expected": width},
            )
    return rows


def parse_char_grid(text: str) -> np.ndarray:
    """Grade de caracteres (dtype `<U1`), shape (linhas, colunas)."""
    return np.array([list(row) for row in _rows(text)], dtype="<U1")


def parse_digit_grid(text: str) -> np.ndarray:
    """Grade de dígitos 0-9 (dtype int8)."""
    rows = _rows(text)
    for i, row in enumerate(rows):
        if not (row.isascii() and row.isdigit()):
            raise InputParseError(
                message=f"Grade de dígitos contém caractere inválido na linha {i + 1}",
                details={"row": i + 1, "line": row},
            )
    return np.array([[int(c) for c in row] for row in rows], dtype=np.int8)


def neighbors4(shape: Tuple[int, int], cell: Cell) -> Iterator[Cell]:
    """Vizinhos ortogonais de `cell` dentro dos limites da grade."""
    rows, cols = shape
    r, c = cell
    for dr, dc in DIRECTIONS_4:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def find_cells(grid: np.ndarray, value: str) -> List[Cell]:
    return [(int(r), int(c)) for r, c in np.argwhere(grid == value)]
