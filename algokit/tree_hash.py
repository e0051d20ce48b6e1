"""Rooted tree hashing and unrooted tree isomorphism via centroids."""

from __future__ import annotations

from typing import List, Tuple

MOD = 10**9 + 7


class Tree:
    """Unrooted tree on vertices ``0 .. n - 1`` with a canonical rooted hash."""

    def __init__(self, n: int, mod: int = MOD) -> None:
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self._adj: List[List[int]] = [[] for _ in range(n)]
        self._mod = mod
        self._powr = [1] * (n + 1)
        for i in range(1, n + 1):
            self._powr[i] = 2 * self._powr[i - 1] % mod

    def __len__(self) -> int:
        return len(self._adj)

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``."""
        self._adj[u].append(v)
        self._adj[v].append(u)

    def _dfs(self, root: int) -> Tuple[List[int], List[int]]:
        n = len(self._adj)
        if not 0 <= root < n:
            raise IndexError(f"vertex {root} out of range for {n} vertices")
        parent = [-1] * n
        order = []
        stack = [root]
        while stack:
            v = stack.pop()
            order.append(v)
            for x in self._adj[v]:
                if x != parent[v]:
                    parent[x] = v
                    stack.append(x)
        sub = [1] * n
        ids = [0] * n
        centroids = []
        for v in reversed(order):
            children = [x for x in self._adj[v] if x != parent[v]]
            for x in children:
                sub[v] += sub[x]
            balanced = all(sub[x] <= n // 2 for x in children) and n - sub[v] <= n // 2
            h = 1
            for child_id, x in sorted((ids[x], x) for x in children):
                h = (self._powr[sub[x] + 1] * h + child_id) % self._mod
            ids[v] = h * 2 % self._mod
            if balanced:
                centroids.append(v)
        return ids, sorted(centroids)

    def centroids(self) -> List[int]:
        """The one or two centroids of the tree, in increasing order."""
        if not self._adj:
            return []
        return self._dfs(0)[1]

    def hash_from(self, root: int) -> int:
        """Hash of the tree rooted at ``root``, equal for isomorphic rooted trees."""
        return self._dfs(root)[0][root]


def are_isomorphic(first: Tree, second: Tree) -> bool:
    """Whether two unrooted trees have the same shape."""
    if len(first) != len(second):
        return False
    if len(first) == 0:
        return True
    return any(
        first.hash_from(a) == second.hash_from(b)
        for a in first.centroids()
        for b in second.centroids()
    )