"""Heavy-light decomposition with path queries over a segment tree."""

from __future__ import annotations

import operator
from typing import Any, Callable, List

from algokit.segtree import SegTree


class HeavyLightDecomposition:
    """Tree on vertices ``1 .. n`` with vertex values and path aggregates.

    Vertex ``0`` is the sentinel above the root. ``op`` should be commutative
    and associative, with ``identity`` as its neutral element.
    """

    def __init__(
        self,
        n: int,
        op: Callable[[Any, Any], Any] = operator.add,
        identity: Any = 0,
    ) -> None:
        if n < 1:
            raise ValueError("tree needs at least one vertex")
        self._n = n
        self._op = op
        self._identity = identity
        self._g: List[List[int]] = [[] for _ in range(n + 1)]
        self._levels = max(1, (n + 1).bit_length())
        self._ran = False

    def __len__(self) -> int:
        return self._n

    def _check(self, v: int) -> None:
        if not 1 <= v <= self._n:
            raise IndexError(f"vertex {v} out of range 1..{self._n}")

    def _require_run(self) -> None:
        if not self._ran:
            raise RuntimeError("call run() before querying")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        self._g[u].append(v)
        self._g[v].append(u)

    def run(self, root: int) -> None:
        """Root the tree at ``root`` and decompose it; all values reset to the identity."""
        self._check(root)
        size = self._n + 1
        par = [0] * size
        depth = [0] * size
        order = []
        stack = [root]
        while stack:
            v = stack.pop()
            order.append(v)
            for x in self._g[v]:
                if x != par[v]:
                    par[x] = v
                    depth[x] = depth[v] + 1
                    stack.append(x)
        subt = [1] * size
        for v in reversed(order):
            if v != root:
                subt[par[v]] += subt[v]
        heavy = [-1] * size
        for v in order:
            best = 0
            for x in self._g[v]:
                if x != par[v] and subt[x] > best:
                    best = subt[x]
                    heavy[v] = x
        up = [par]
        for _ in range(1, self._levels):
            prev = up[-1]
            up.append([prev[prev[v]] for v in range(size)])
        head = [0] * size
        pos = [0] * size
        cur = 0
        chain = [(root, root)]
        while chain:
            v, h = chain.pop()
            head[v] = h
            pos[v] = cur
            cur += 1
            light = [x for x in self._g[v] if x != par[v] and x != heavy[v]]
            chain.extend((x, x) for x in reversed(light))
            if heavy[v] != -1:
                chain.append((heavy[v], h))
        self._par, self._depth, self._subt = par, depth, subt
        self._heavy, self._head, self._pos, self._up = heavy, head, pos, up
        self._seg = SegTree(size, self._op, self._identity)
        self._ran = True

    def is_ancestor(self, a: int, b: int) -> bool:
        """Whether ``a`` is an ancestor of ``b`` (a vertex is its own ancestor)."""
        self._require_run()
        return self._pos[a] <= self._pos[b] < self._pos[a] + self._subt[a]

    def kth_ancestor(self, v: int, k: int) -> int:
        """The ancestor ``k`` levels above ``v``; ``0`` past the root."""
        self._require_run()
        if k < 0:
            raise ValueError("k must be non-negative")
        if k > self._depth[v]:
            return 0
        for i in range(self._levels):
            if (k >> i) & 1:
                v = self._up[i][v]
        return v

    def child_towards(self, v: int, u: int) -> int:
        """The child of ancestor ``u`` on the path down to ``v``."""
        self._require_run()
        if u == v or not self.is_ancestor(u, v):
            raise ValueError(f"{u} is not a proper ancestor of {v}")
        return self.kth_ancestor(v, self._depth[v] - self._depth[u] - 1)

    def set_value(self, v: int, value: Any) -> None:
        """Assign ``value`` to vertex ``v``."""
        self._require_run()
        self._check(v)
        self._seg.set(self._pos[v], value)

    def path_query(self, a: int, b: int) -> Any:
        """Combine the values of all vertices on the path from ``a`` to ``b``."""
        self._require_run()
        self._check(a)
        self._check(b)
        head, pos, depth, par = self._head, self._pos, self._depth, self._par
        result = self._identity
        while head[a] != head[b]:
            if depth[head[a]] > depth[head[b]]:
                a, b = b, a
            result = self._op(result, self._seg.prod(pos[head[b]], pos[b] + 1))
            b = par[head[b]]
        if depth[a] > depth[b]:
            a, b = b, a
        return self._op(result, self._seg.prod(pos[a], pos[b] + 1))