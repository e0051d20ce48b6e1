"""Bridges and articulation points of undirected graphs."""

from __future__ import annotations

from typing import List, Sequence, Set, Tuple


def _lowlink(adj: Sequence[Sequence[int]]) -> Tuple[List[Tuple[int, int]], Set[int]]:
    n = len(adj)
    tin = [-1] * n
    low = [0] * n
    found_bridges: List[Tuple[int, int]] = []
    cuts: Set[int] = set()
    clock = 0
    for root in range(n):
        if tin[root] != -1:
            continue
        tin[root] = low[root] = clock
        clock += 1
        root_children = 0
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            v, parent, it = stack[-1]
            for x in it:
                if x == parent:
                    continue
                if tin[x] != -1:
                    low[v] = min(low[v], tin[x])
                else:
                    tin[x] = low[x] = clock
                    clock += 1
                    stack.append((x, v, iter(adj[x])))
                    break
            else:
                stack.pop()
                if parent == -1:
                    continue
                low[parent] = min(low[parent], low[v])
                if low[v] > tin[parent]:
                    found_bridges.append((parent, v))
                if parent == root:
                    root_children += 1
                elif low[v] >= tin[parent]:
                    cuts.add(parent)
        if root_children > 1:
            cuts.add(root)
    return found_bridges, cuts


def bridges(adj: Sequence[Sequence[int]]) -> List[Tuple[int, int]]:
    """Edges whose removal disconnects the graph, as ``(parent, child)`` in DFS order."""
    return _lowlink(adj)[0]


def articulation_points(adj: Sequence[Sequence[int]]) -> List[int]:
    """Vertices whose removal disconnects their component, in increasing order."""
    return sorted(_lowlink(adj)[1])