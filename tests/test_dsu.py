import random

import pytest

from algokit.dsu import DynamicConnectivity, RollbackDSU, offline_components


def _count_components(n, edges):
    adj = {v: set() for v in range(1, n + 1)}
    for v, u in edges:
        adj[v].add(u)
        adj[u].add(v)
    seen = set()
    count = 0
    for start in adj:
        if start in seen:
            continue
        count += 1
        stack = [start]
        seen.add(start)
        while stack:
            x = stack.pop()
            for y in adj[x] - seen:
                seen.add(y)
                stack.append(y)
    return count


def test_unite_and_rollback():
    dsu = RollbackDSU(5)
    assert dsu.components == 5
    assert dsu.unite(1, 2)
    assert dsu.unite(3, 4)
    assert not dsu.unite(2, 1)
    assert dsu.unite(2, 4)
    assert dsu.find(1) == dsu.find(3)
    assert dsu.components == 2
    dsu.rollback()
    assert dsu.find(1) != dsu.find(3)
    assert dsu.find(1) == dsu.find(2)
    assert dsu.components == 3
    dsu.rollback()
    dsu.rollback()
    dsu.rollback()
    assert dsu.components == 5
    assert [dsu.find(v) for v in range(1, 6)] == [1, 2, 3, 4, 5]


def test_dynamic_connectivity_intervals():
    conn = DynamicConnectivity(3, 4)
    conn.add(1, 2, 1, 2)
    conn.add(2, 4, 2, 3)
    result = conn.solve()
    edges_at = [[], [(1, 2)], [(1, 2), (2, 3)], [(2, 3)], [(2, 3)]]
    assert result == [_count_components(3, e) for e in edges_at]


def test_offline_matches_brute_force():
    rng = random.Random(2)
    n = 7
    alive = set()
    ops = []
    expected = []
    for _ in range(120):
        roll = rng.random()
        if roll < 0.3:
            ops.append(("?",))
            expected.append(_count_components(n, alive))
        elif roll < 0.7 or not alive:
            v, u = rng.sample(range(1, n + 1), 2)
            edge = (min(v, u), max(v, u))
            if edge in alive:
                continue
            alive.add(edge)
            ops.append(("+", u, v))
        else:
            edge = rng.choice(sorted(alive))
            alive.remove(edge)
            ops.append(("-", edge[1], edge[0]))
    assert offline_components(n, ops) == expected


def test_removing_unknown_edge():
    with pytest.raises(KeyError):
        offline_components(3, [("-", 1, 2)])