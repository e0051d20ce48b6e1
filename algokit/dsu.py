"""Disjoint set union with rollback and offline dynamic connectivity."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple


class RollbackDSU:
    """Union by rank without path compression, so unions can be undone.

    Vertices are numbered ``1 .. n``.
    """

    def __init__(self, n: int) -> None:
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._history: List[Tuple[int, int, int, int]] = []
        self.components = n

    def find(self, v: int) -> int:
        """Representative of the set holding ``v``."""
        while self._parent[v] != v:
            v = self._parent[v]
        return v

    def unite(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False if they were already joined."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._history.append((x, y, self._rank[x], self._rank[y]))
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        self.components -= 1
        return True

    def rollback(self) -> None:
        """Undo the most recent successful union; no-op when there is none."""
        if not self._history:
            return
        v, u, rank_v, rank_u = self._history.pop()
        self.components += 1
        self._parent[v] = v
        self._parent[u] = u
        self._rank[v] = rank_v
        self._rank[u] = rank_u


class DynamicConnectivity:
    """Offline connectivity over time points ``0 .. q`` with edges alive on intervals."""

    def __init__(self, n: int, q: int) -> None:
        self._n = n
        self._q = q
        self._seg: List[List[Tuple[int, int]]] = [[] for _ in range(4 * q + 5)]

    def add(self, left: int, right: int, v: int, u: int) -> None:
        """Make edge ``(v, u)`` present at every time in ``left .. right``."""
        if left > right:
            return
        self._add(1, 0, self._q, left, right, (v, u))

    def _add(self, idx: int, st: int, en: int, ql: int, qr: int, edge: Tuple[int, int]) -> None:
        if st > qr or en < ql:
            return
        if ql <= st and en <= qr:
            self._seg[idx].append(edge)
            return
        md = (st + en) >> 1
        self._add(idx << 1, st, md, ql, min(qr, md), edge)
        self._add(idx << 1 | 1, md + 1, en, max(md + 1, ql), qr, edge)

    def solve(self) -> List[int]:
        """Number of connected components at each time ``0 .. q``."""
        dsu = RollbackDSU(self._n)
        answer = [0] * (self._q + 1)
        self._run(dsu, 1, 0, self._q, answer)
        return answer

    def _run(self, dsu: RollbackDSU, v: int, left: int, right: int, answer: List[int]) -> None:
        joined = [dsu.unite(a, b) for a, b in self._seg[v]]
        if left == right:
            answer[left] = dsu.components
        else:
            md = (left + right) >> 1
            self._run(dsu, v << 1, left, md, answer)
            self._run(dsu, v << 1 | 1, md + 1, right, answer)
        for _ in range(sum(joined)):
            dsu.rollback()


def offline_components(n: int, operations: Iterable[Sequence]) -> List[int]:
    """Answer ``("?",)`` queries among ``("+", v, u)`` and ``("-", v, u)`` edge operations.

    Returns the component count at each query, in order.
    """
    ops = [tuple(op) for op in operations]
    q = len(ops)
    conn = DynamicConnectivity(n, q)
    opened = {}
    queries = []
    for i, op in enumerate(ops):
        kind = op[0]
        if kind == "?":
            queries.append(i)
            continue
        v, u = sorted(op[1:3])
        if kind == "+":
            opened[(v, u)] = i
        elif kind == "-":
            if (v, u) not in opened:
                raise KeyError(f"edge {(v, u)} removed before it was added")
            conn.add(opened.pop((v, u)), i - 1, v, u)
        else:
            raise ValueError(f"unknown operation {kind!r}")
    for (v, u), start in opened.items():
        conn.add(start, q, v, u)
    counts = conn.solve()
    return [counts[i] for i in queries]