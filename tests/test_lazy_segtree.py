import math
import random

import pytest

from algokit.lazy_segtree import LazySegTree, min_add_tree


def test_min_add_against_list():
    rng = random.Random(7)
    n = 37
    ref = [rng.randint(-50, 50) for _ in range(n)]
    tree = min_add_tree(ref)
    for _ in range(400):
        kind = rng.randrange(3)
        left = rng.randrange(n)
        right = rng.randrange(left + 1, n + 1)
        if kind == 0:
            delta = rng.randint(-20, 20)
            tree.range_apply(left, right, delta)
            ref[left:right] = [x + delta for x in ref[left:right]]
        elif kind == 1:
            value = rng.randint(-100, 100)
            tree.update(left, value)
            ref[left] = value
        else:
            assert tree.range_query(left, right) == min(ref[left:right])
    assert tree.range_query(0, n) == min(ref)


def test_empty_query_is_identity():
    tree = min_add_tree([3, 1, 2])
    assert tree.range_query(2, 2) == math.inf


def test_sum_with_lengths():
    rng = random.Random(3)
    n = 20
    ref = [rng.randint(0, 9) for _ in range(n)]
    tree = LazySegTree(
        [(v, 1) for v in ref],
        lambda a, b: (a[0] + b[0], a[1] + b[1]),
        (0, 0),
        lambda node, d: (node[0] + d * node[1], node[1]),
        lambda a, b: a + b,
        0,
    )
    for _ in range(200):
        left = rng.randrange(n)
        right = rng.randrange(left + 1, n + 1)
        if rng.random() < 0.5:
            delta = rng.randint(-5, 5)
            tree.range_apply(left, right, delta)
            ref[left:right] = [x + delta for x in ref[left:right]]
        else:
            total, count = tree.range_query(left, right)
            assert total == sum(ref[left:right])
            assert count == right - left


def test_size_only_constructor():
    tree = min_add_tree(range(1))
    assert len(tree) == 1
    sized = LazySegTree(4, min, math.inf, lambda a, b: a + b, lambda a, b: a + b, 0)
    sized.update(2, 5)
    assert sized.range_query(0, 4) == 5


def test_invalid_inputs():
    with pytest.raises(ValueError):
        min_add_tree([])
    tree = min_add_tree([1, 2])
    with pytest.raises(IndexError):
        tree.update(2, 0)