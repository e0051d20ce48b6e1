"""Minimum-cost maximum flow with Dijkstra and potentials."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class FlowEdge:
    """An original edge of the network together with the flow it carries."""

    source: int
    target: int
    cap: int
    cost: int
    flow: int


class MinCostFlow:
    """Network on vertices ``0 .. n - 1``; edge costs must be non-negative."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self._n = n
        self._to: List[int] = []
        self._cap: List[int] = []
        self._cost: List[int] = []
        self._graph: List[List[int]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return self._n

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range for {self._n} vertices")

    def add_edge(self, u: int, v: int, cap, cost) -> None:
        """Add a directed edge ``u -> v`` with capacity ``cap`` and unit cost ``cost``."""
        self._check(u)
        self._check(v)
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        self._graph[u].append(len(self._to))
        self._to.append(v)
        self._cap.append(cap)
        self._cost.append(cost)
        self._graph[v].append(len(self._to))
        self._to.append(u)
        self._cap.append(0)
        self._cost.append(-cost)

    def _dijkstra(self, s: int, t: int, h: list) -> Tuple[bool, list, list]:
        dis = [math.inf] * self._n
        pre = [-1] * self._n
        dis[s] = 0
        heap = [(0, s)]
        while heap:
            d, u = heapq.heappop(heap)
            if dis[u] != d:
                continue
            for i in self._graph[u]:
                v = self._to[i]
                if self._cap[i] > 0:
                    nd = d + h[u] - h[v] + self._cost[i]
                    if dis[v] > nd:
                        dis[v] = nd
                        pre[v] = i
                        heapq.heappush(heap, (nd, v))
        return dis[t] != math.inf, dis, pre

    def flow(self, s: int, t: int) -> Tuple[int, int]:
        """Send maximum flow from ``s`` to ``t`` at minimum cost; returns ``(flow, cost)``."""
        self._check(s)
        self._check(t)
        if s == t:
            raise ValueError("source and sink must differ")
        total_flow = 0
        total_cost = 0
        h = [0] * self._n
        while True:
            found, dis, pre = self._dijkstra(s, t, h)
            if not found:
                break
            for i, d in enumerate(dis):
                if d != math.inf:
                    h[i] += d
            aug = math.inf
            v = t
            while v != s:
                aug = min(aug, self._cap[pre[v]])
                v = self._to[pre[v] ^ 1]
            v = t
            while v != s:
                self._cap[pre[v]] -= aug
                self._cap[pre[v] ^ 1] += aug
                v = self._to[pre[v] ^ 1]
            total_flow += aug
            total_cost += aug * h[t]
        return total_flow, total_cost

    def edges(self) -> List[FlowEdge]:
        """The original edges in insertion order with their current flow."""
        return [
            FlowEdge(
                source=self._to[i + 1],
                target=self._to[i],
                cap=self._cap[i] + self._cap[i + 1],
                cost=self._cost[i],
                flow=self._cap[i + 1],
            )
            for i in range(0, len(self._to), 2)
        ]