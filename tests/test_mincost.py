import random
from collections import defaultdict

import pytest

from algokit.maxflow import MaxFlow
from algokit.mincost import MinCostFlow


def _random_edges(seed, n=7, m=18):
    rng = random.Random(seed)
    edges = []
    for _ in range(m):
        u, v = rng.randrange(n), rng.randrange(n)
        if u != v:
            edges.append((u, v, rng.randint(1, 6), rng.randint(0, 9)))
    return edges


def test_single_edge():
    net = MinCostFlow(2)
    net.add_edge(0, 1, 5, 2)
    assert net.flow(0, 1) == (5, 10)


def test_cheaper_branch_is_used():
    net = MinCostFlow(5)
    net.add_edge(0, 1, 1, 0)
    net.add_edge(1, 2, 1, 1)
    net.add_edge(1, 3, 1, 5)
    net.add_edge(2, 4, 1, 0)
    net.add_edge(3, 4, 1, 0)
    assert net.flow(0, 4) == (1, 1)
    by_target = {(e.source, e.target): e.flow for e in net.edges()}
    assert by_target[(1, 2)] == by_target[(0, 1)]
    assert by_target[(1, 3)] == 0


@pytest.mark.parametrize("seed", range(8))
def test_flow_value_matches_max_flow(seed):
    n = 7
    edges = _random_edges(seed, n)
    mcf = MinCostFlow(n)
    mf = MaxFlow(n)
    for u, v, c, w in edges:
        mcf.add_edge(u, v, c, w)
        mf.add_edge(u, v, c)
    value, _ = mcf.flow(0, n - 1)
    assert value == mf.max_flow(0, n - 1)


@pytest.mark.parametrize("seed", range(8))
def test_edges_are_consistent(seed):
    n = 7
    edges = _random_edges(seed, n)
    net = MinCostFlow(n)
    for u, v, c, w in edges:
        net.add_edge(u, v, c, w)
    value, cost = net.flow(0, n - 1)
    reported = net.edges()
    assert [(e.source, e.target, e.cap, e.cost) for e in reported] == edges
    assert all(0 <= e.flow <= e.cap for e in reported)
    assert cost == sum(e.flow * e.cost for e in reported)
    balance = defaultdict(int)
    for e in reported:
        balance[e.source] -= e.flow
        balance[e.target] += e.flow
    assert balance[0] == -value
    assert balance[n - 1] == value
    assert all(balance[v] == 0 for v in range(1, n - 1))


def test_same_source_and_sink_raises():
    net = MinCostFlow(2)
    with pytest.raises(ValueError):
        net.flow(1, 1)


def test_bad_vertex_raises():
    net = MinCostFlow(2)
    with pytest.raises(IndexError):
        net.add_edge(0, 5, 1, 1)