"""Strongly connected components and their condensation."""

from __future__ import annotations

from typing import List, Sequence, Set


def kosaraju(adj: Sequence[Sequence[int]]) -> List[int]:
    """Component id of every vertex, numbered in topological order of the condensation.

    Every edge ``u -> v`` satisfies ``comp[u] <= comp[v]``.
    """
    n = len(adj)
    seen = [False] * n
    order: List[int] = []
    for start in range(n):
        if seen[start]:
            continue
        seen[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            v, it = stack[-1]
            for x in it:
                if not seen[x]:
                    seen[x] = True
                    stack.append((x, iter(adj[x])))
                    break
            else:
                stack.pop()
                order.append(v)

    radj: List[List[int]] = [[] for _ in range(n)]
    for v, targets in enumerate(adj):
        for x in targets:
            radj[x].append(v)

    comp = [-1] * n
    count = 0
    for start in reversed(order):
        if comp[start] != -1:
            continue
        comp[start] = count
        stack = [start]
        while stack:
            v = stack.pop()
            for x in radj[v]:
                if comp[x] == -1:
                    comp[x] = count
                    stack.append(x)
        count += 1
    return comp


def tarjan(adj: Sequence[Sequence[int]]) -> List[int]:
    """Component id of every vertex, numbered in reverse topological order.

    Every edge ``u -> v`` satisfies ``comp[u] >= comp[v]``.
    """
    n = len(adj)
    index = [-1] * n
    low = [0] * n
    on_stack = [False] * n
    comp = [-1] * n
    pending: List[int] = []
    clock = 0
    count = 0
    for start in range(n):
        if index[start] != -1:
            continue
        index[start] = low[start] = clock
        clock += 1
        pending.append(start)
        on_stack[start] = True
        work = [(start, iter(adj[start]))]
        while work:
            v, it = work[-1]
            descended = False
            for x in it:
                if index[x] == -1:
                    index[x] = low[x] = clock
                    clock += 1
                    pending.append(x)
                    on_stack[x] = True
                    work.append((x, iter(adj[x])))
                    descended = True
                    break
                if on_stack[x]:
                    low[v] = min(low[v], index[x])
            if descended:
                continue
            work.pop()
            if work:
                parent = work[-1][0]
                low[parent] = min(low[parent], low[v])
            if low[v] == index[v]:
                while True:
                    w = pending.pop()
                    on_stack[w] = False
                    comp[w] = count
                    if w == v:
                        break
                count += 1
    return comp


def condensation(adj: Sequence[Sequence[int]], comp: Sequence[int], count: int) -> List[Set[int]]:
    """Successor sets of the component DAG with ``count`` components."""
    dag: List[Set[int]] = [set() for _ in range(count)]
    for v, targets in enumerate(adj):
        for x in targets:
            if comp[x] != comp[v]:
                dag[comp[v]].add(comp[x])
    return dag


def longest_chain(adj: Sequence[Sequence[int]]) -> int:
    """Largest number of components on one path of the condensation; 0 for no vertices."""
    comp = kosaraju(adj)
    if not comp:
        return 0
    count = max(comp) + 1
    dag = condensation(adj, comp, count)
    best = [1] * count
    for c in range(count):
        for d in dag[c]:
            best[d] = max(best[d], best[c] + 1)
    return max(best)