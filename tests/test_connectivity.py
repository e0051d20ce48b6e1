import random

import pytest

from algokit.connectivity import articulation_points, bridges


def _adj(n, edges):
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _components(n, edges, removed_vertex=None):
    parent = list(range(n))

    def find(v):
        while parent[v] != v:
            parent[v] = parent[parent[v]]
            v = parent[v]
        return v

    for u, v in edges:
        if removed_vertex in (u, v):
            continue
        parent[find(u)] = find(v)
    return len({find(v) for v in range(n) if v != removed_vertex})


def test_path_graph():
    adj = _adj(3, [(0, 1), (1, 2)])
    assert {frozenset(e) for e in bridges(adj)} == {frozenset((0, 1)), frozenset((1, 2))}
    assert articulation_points(adj) == [1]


def test_cycle_has_none():
    adj = _adj(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    assert bridges(adj) == []
    assert articulation_points(adj) == []


def test_two_triangles_joined():
    edges = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3)]
    adj = _adj(6, edges)
    assert [frozenset(e) for e in bridges(adj)] == [frozenset((2, 3))]
    assert articulation_points(adj) == [2, 3]


def test_bridge_is_parent_child():
    adj = _adj(2, [(0, 1)])
    assert bridges(adj) == [(0, 1)]


@pytest.mark.parametrize("seed", range(10))
def test_against_removal(seed):
    rng = random.Random(seed)
    n = 10
    pairs = {tuple(sorted(rng.sample(range(n), 2))) for _ in range(13)}
    edges = sorted(pairs)
    adj = _adj(n, edges)
    base = _components(n, edges)
    found = {frozenset(e) for e in bridges(adj)}
    for edge in edges:
        rest = [e for e in edges if e != edge]
        assert (frozenset(edge) in found) == (_components(n, rest) > base)
    cuts = set(articulation_points(adj))
    for v in range(n):
        isolated = all(v not in e for e in edges)
        after = _components(n, edges, removed_vertex=v)
        expected = after > base - (1 if isolated else 0)
        assert (v in cuts) == expected