import random

import pytest

from algokit.merge_sort_tree import MergeSortTree


def test_against_brute_force():
    rng = random.Random(5)
    values = [rng.randint(0, 30) for _ in range(25)]
    tree = MergeSortTree(values)
    for _ in range(300):
        left = rng.randrange(len(values))
        right = rng.randrange(left, len(values))
        x = rng.randint(-2, 32)
        window = values[left:right + 1]
        assert tree.count_less_equal(left, right, x) == sum(1 for v in window if v <= x)
        assert tree.lower_bound_val(left, right, x) == min((v for v in window if v >= x), default=None)


def test_exact_hit_and_miss():
    values = [8, 1, 5, 5, 9]
    tree = MergeSortTree(values)
    assert tree.lower_bound_val(0, 4, 5) == 5
    assert tree.lower_bound_val(1, 3, 6) is None
    assert tree.count_less_equal(0, 4, max(values)) == len(values)


def test_empty_rejected():
    with pytest.raises(ValueError):
        MergeSortTree([])