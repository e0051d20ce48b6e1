"""Eulerian circuits in undirected multigraphs (Hierholzer's algorithm)."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple


def euler_circuit(n: int, edges: Iterable[Sequence[int]]) -> List[int]:
    """Closed walk from vertex ``0`` using every edge exactly once.

    Vertices are ``0 .. n - 1`` and ``edges`` holds ``(u, v)`` pairs; self-loops
    and parallel edges are allowed. Raises ValueError when no such circuit exists.
    """
    if n < 1:
        raise ValueError("graph needs at least one vertex")
    edge_list: List[Tuple[int, int]] = [(int(u), int(v)) for u, v in edges]
    graph: List[List[Tuple[int, int]]] = [[] for _ in range(n)]
    degree = [0] * n
    for idx, (u, v) in enumerate(edge_list):
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge {(u, v)} has a vertex out of range")
        graph[u].append((v, idx))
        graph[v].append((u, idx))
        degree[u] += 1
        degree[v] += 1
    if any(d % 2 for d in degree):
        raise ValueError("a vertex has odd degree")

    seen = [False] * len(edge_list)
    path: List[int] = []
    stack = [0]
    while stack:
        v = stack[-1]
        adjacent = graph[v]
        while adjacent and seen[adjacent[-1][1]]:
            adjacent.pop()
        if adjacent:
            son, idx = adjacent.pop()
            seen[idx] = True
            stack.append(son)
        else:
            path.append(stack.pop())
    if len(path) != len(edge_list) + 1:
        raise ValueError("edges are not all reachable from vertex 0")
    return path