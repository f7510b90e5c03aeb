# src/aoc2022/utils/shortest_path.py
"""
Busca de caminhos mínimos em grafos implícitos.

Os grafos são descritos por uma função `neighbors(node)`; os nós só precisam
ser hashable.
"""

from __future__ import annotations

import heapq
from collections import deque
from itertools import count
from typing import Callable, Dict, Hashable, Iterable, Optional, Tuple, TypeVar


N = TypeVar("N", bound=Hashable)


def bfs_distances(start: N, neighbors: Callable[[N], Iterable[N]]) -> Dict[N, int]:
    """
    Distância (em passos) de `start` até todo nó alcançável.

    Grafo não ponderado; cada nó é visitado uma única vez.
    """
    dist: Dict[N, int] = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt in neighbors(node):
            if nxt not in dist:
                dist[nxt] = dist[node] + 1
                queue.append(nxt)
    return dist


def dijkstra(
    start: N,
    is_goal: Callable[[N], bool],
    neighbors: Callable[[N], Iterable[Tuple[N, int]]],
) -> Optional[int]:
    """
    Custo mínimo de `start` até o primeiro nó que satisfaz `is_goal`.

    `neighbors` devolve pares (nó, custo) com custos não negativos.
    Retorna None quando nenhum objetivo é alcançável.
    """
    tie = count()
    heap = [(0, next(tie), start)]
    best: Dict[N, int] = {start: 0}
    while heap:
        cost, _, node = heapq.heappop(heap)
        if cost > best.get(node, cost):
            continue
        if is_goal(node):
            return cost
        for nxt, step in neighbors(node):
            new_cost = cost + step
            if new_cost < best.get(nxt, new_cost + 1):
                best[nxt] = new_cost
                heapq.heappush(heap, (new_cost, next(tie), nxt))
    return None
