"""Tree utilities: binary-lifting LCA, virtual trees and centroids."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple


class LCA:
    """Lowest common ancestor via Euler times and binary lifting on a tree."""

    def __init__(self, adj: Sequence[Sequence[int]], root: int = 0) -> None:
        n = len(adj)
        if not 0 <= root < n:
            raise IndexError(f"root {root} out of range for {n} vertices")
        self.root = root
        self.depth = [0] * n
        self.tin = [0] * n
        self.tout = [0] * n
        parent = [root] * n
        seen = [False] * n
        seen[root] = True
        timer = 0
        stack: List[Tuple[int, bool]] = [(root, False)]
        while stack:
            v, leaving = stack.pop()
            if leaving:
                self.tout[v] = timer
                continue
            timer += 1
            self.tin[v] = timer
            stack.append((v, True))
            for x in reversed(list(adj[v])):
                if x == parent[v] and v != root:
                    continue
                if seen[x]:
                    raise ValueError("graph contains a cycle")
                seen[x] = True
                parent[x] = v
                self.depth[x] = self.depth[v] + 1
                stack.append((x, False))
        if timer != n:
            raise ValueError("graph is not connected")
        self._up = [parent]
        for _ in range(1, max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[prev[v]] for v in range(n)])

    def is_ancestor(self, u: int, v: int) -> bool:
        """Whether ``u`` is an ancestor of ``v`` (a vertex is its own ancestor)."""
        return self.tin[u] <= self.tin[v] and self.tout[u] >= self.tout[v]

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for row in reversed(self._up):
            if not self.is_ancestor(row[u], v):
                u = row[u]
        return self._up[0][u]


def build_virtual_tree(lca: LCA, nodes: Iterable[int]) -> Dict[int, List[int]]:
    """Undirected virtual tree over ``nodes`` and their pairwise LCAs.

    Keys are listed in DFS entry order, so the first key is the virtual root.
    """
    ordered = sorted(set(nodes), key=lambda v: lca.tin[v])
    if not ordered:
        return {}
    extra = {lca.lca(a, b) for a, b in zip(ordered, ordered[1:])}
    ordered = sorted(set(ordered) | extra, key=lambda v: lca.tin[v])
    tree: Dict[int, List[int]] = {u: [] for u in ordered}
    stack = [ordered[0]]
    for u in ordered[1:]:
        while len(stack) > 1 and not lca.is_ancestor(stack[-1], u):
            stack.pop()
        tree[stack[-1]].append(u)
        tree[u].append(stack[-1])
        stack.append(u)
    return tree


def _preorder(
    adj: Sequence[Iterable[int]], root: int, removed: Optional[Sequence[bool]] = None
) -> Tuple[List[int], Dict[int, int]]:
    order: List[int] = []
    parent = {root: -1}
    stack = [root]
    while stack:
        v = stack.pop()
        order.append(v)
        for x in reversed(list(adj[v])):
            if x != parent[v] and not (removed is not None and removed[x]):
                parent[x] = v
                stack.append(x)
    return order, parent


def _sizes(order: List[int], parent: Dict[int, int]) -> Dict[int, int]:
    size = dict.fromkeys(order, 1)
    for v in reversed(order):
        p = parent[v]
        if p != -1:
            size[p] += size[v]
    return size


def find_centroid(adj: Sequence[Sequence[int]]) -> int:
    """A vertex whose removal leaves components of at most ``n // 2`` vertices."""
    n = len(adj)
    if n == 0:
        raise ValueError("tree has no vertices")
    order, parent = _preorder(adj, 0)
    if len(order) != n:
        raise ValueError("graph is not a connected tree")
    size = _sizes(order, parent)
    centroid = order[0]
    for v in order:
        parts = [size[x] for x in adj[v] if x != parent[v]]
        parts.append(n - size[v])
        if max(parts) <= n // 2:
            centroid = v
    return centroid


def centroid_decomposition(adj: Sequence[Sequence[int]]) -> List[int]:
    """Parent of every vertex in the centroid tree; the top centroid is its own parent."""
    n = len(adj)
    neighbours = [sorted(a) for a in adj]
    parent_of = [-1] * n
    removed = [False] * n
    work: List[Tuple[int, int]] = [(0, -1)] if n else []
    while work:
        root, above = work.pop()
        order, parent = _preorder(neighbours, root, removed)
        size = _sizes(order, parent)
        half = len(order) // 2
        u = root
        while True:
            for x in neighbours[u]:
                if not removed[x] and x != parent[u] and size[x] > half:
                    u = x
                    break
            else:
                break
        parent_of[u] = u if above == -1 else above
        removed[u] = True
        work.extend((x, u) for x in neighbours[u] if not removed[x])
    if any(p == -1 for p in parent_of):
        raise ValueError("graph is not connected")
    return parent_of