# src/aoc2022/utils/intervals.py
"""Intervalos inteiros fechados `[lo, hi]`."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple


Interval = Tuple[int, int]


def merge_intervals(intervals: Iterable[Interval]) -> List[Interval]:
    """Une intervalos sobrepostos ou adjacentes; resultado ordenado e disjunto."""
    merged: List[Interval] = []
    for lo, hi in sorted(intervals):
        if merged and lo <= merged[-1][1] + 1:
            prev_lo, prev_hi = merged[-1]
            merged[-1] = (prev_lo, max(prev_hi, hi))
        else:
            merged.append((lo, hi))
    return merged


def covered_length(intervals: Iterable[Interval]) -> int:
    return sum(hi - lo + 1 for lo, hi in merge_intervals(intervals))


def first_gap(intervals: Iterable[Interval], lo: int, hi: int) -> Optional[int]:
    """Menor inteiro em `[lo, hi]` não coberto pelos intervalos, ou None."""
    candidate = lo
    for start, end in merge_intervals(intervals):
        if end < candidate:
            continue
        if start > candidate:
            break
        candidate = end + 1
        if candidate > hi:
            return None
    return candidate if candidate <= hi else None


def contains(outer: Interval, inner: Interval) -> bool:
    return outer[0] <= inner[0] and inner[1] <= outer[1]


def overlaps(a: Interval, b: Interval) -> bool:
    return a[0] <= b[1] and b[0] <= a[1]
