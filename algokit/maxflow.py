"""Maximum flow with Dinic's algorithm."""

from __future__ import annotations

from collections import deque
from typing import List, Set


class MaxFlow:
    """Flow network on vertices ``0 .. n - 1`` solved with Dinic's algorithm."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self._n = n
        self._to: List[int] = []
        self._cap: List[int] = []
        self._graph: List[List[int]] = [[] for _ in range(n)]
        self._level: List[int] = []
        self._cur: List[int] = []

    def __len__(self) -> int:
        return self._n

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range for {self._n} vertices")

    def add_edge(self, u: int, v: int, cap) -> None:
        """Add a directed edge ``u -> v`` with capacity ``cap``."""
        self._check(u)
        self._check(v)
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        self._graph[u].append(len(self._to))
        self._to.append(v)
        self._cap.append(cap)
        self._graph[v].append(len(self._to))
        self._to.append(u)
        self._cap.append(0)

    def _bfs(self, s: int, t: int) -> bool:
        level = [-1] * self._n
        level[s] = 0
        self._level = level
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for i in self._graph[u]:
                v = self._to[i]
                if self._cap[i] > 0 and level[v] == -1:
                    level[v] = level[u] + 1
                    if v == t:
                        return True
                    queue.append(v)
        return False

    def _dfs(self, u: int, t: int, f):
        if u == t:
            return f
        remaining = f
        edges = self._graph[u]
        level, cap, to, cur = self._level, self._cap, self._to, self._cur
        while cur[u] < len(edges):
            j = edges[cur[u]]
            v = to[j]
            c = cap[j]
            if c > 0 and level[v] == level[u] + 1:
                pushed = self._dfs(v, t, min(remaining, c))
                cap[j] -= pushed
                cap[j ^ 1] += pushed
                remaining -= pushed
                if remaining == 0:
                    return f
            cur[u] += 1
        return f - remaining

    def max_flow(self, s: int, t: int):
        """Push as much flow as possible from ``s`` to ``t`` and return its value."""
        self._check(s)
        self._check(t)
        total = 0
        while self._bfs(s, t):
            self._cur = [0] * self._n
            limit = sum(self._cap[i] for i in self._graph[s])
            total += self._dfs(s, t, limit)
        return total

    def min_cut(self, s: int) -> Set[int]:
        """Vertices reachable from ``s`` in the residual network."""
        self._check(s)
        seen = {s}
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for i in self._graph[u]:
                v = self._to[i]
                if self._cap[i] > 0 and v not in seen:
                    seen.add(v)
                    queue.append(v)
        return seen