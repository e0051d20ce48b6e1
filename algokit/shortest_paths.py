"""Topological order and shortest-path algorithms."""

from __future__ import annotations

import heapq
import math
from typing import Iterable, List, Sequence, Tuple


def topo_sort(adj: Sequence[Sequence[int]]) -> List[int]:
    """Kahn's topological order of a directed graph; ValueError if it has a cycle."""
    n = len(adj)
    indeg = [0] * n
    for targets in adj:
        for x in targets:
            indeg[x] += 1
    order = [v for v in range(n) if indeg[v] == 0]
    for v in order:
        for x in adj[v]:
            indeg[x] -= 1
            if indeg[x] == 0:
                order.append(x)
    if len(order) != n:
        raise ValueError("graph contains a cycle")
    return order


def bellman_ford(n: int, edges: Iterable[Sequence], source: int) -> List[float]:
    """Distances from ``source`` over directed ``(a, b, cost)`` edges; inf if unreachable.

    Negative costs are allowed; negative cycles are not detected.
    """
    edge_list = [(a, b, cost) for a, b, cost in edges]
    dist: List[float] = [math.inf] * n
    dist[source] = 0
    for _ in range(n - 1):
        changed = False
        for a, b, cost in edge_list:
            if dist[a] < math.inf and dist[a] + cost < dist[b]:
                dist[b] = dist[a] + cost
                changed = True
        if not changed:
            break
    return dist


def dijkstra(adj: Sequence[Sequence[Tuple[int, float]]], source: int) -> Tuple[List[float], List[int]]:
    """Distances and shortest-path parents from ``source`` over ``(to, length)`` lists.

    Unreachable vertices get distance inf and parent -1.
    """
    n = len(adj)
    dist: List[float] = [math.inf] * n
    parent = [-1] * n
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, v = heapq.heappop(heap)
        if d != dist[v]:
            continue
        for to, length in adj[v]:
            nd = d + length
            if nd < dist[to]:
                dist[to] = nd
                parent[to] = v
                heapq.heappush(heap, (nd, to))
    return dist, parent


def floyd_warshall(dist: Sequence[Sequence[float]]) -> List[List[float]]:
    """All-pairs shortest distances from a square matrix of edge lengths (inf for none)."""
    d = [list(row) for row in dist]
    n = len(d)
    if any(len(row) != n for row in d):
        raise ValueError("distance matrix must be square")
    for k in range(n):
        row_k = d[k]
        for i in range(n):
            row_i = d[i]
            dik = row_i[k]
            if dik == math.inf:
                continue
            for j in range(n):
                if row_k[j] < math.inf and dik + row_k[j] < row_i[j]:
                    row_i[j] = dik + row_k[j]
    return d