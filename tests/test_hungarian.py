import itertools
import random

import pytest

from algokit.hungarian import hungarian


def _total(cost, assignment):
    return sum(cost[i][j] for i, j in enumerate(assignment))


def _best(cost):
    n = len(cost)
    return min(_total(cost, perm) for perm in itertools.permutations(range(n)))


def test_empty_matrix():
    assert hungarian([]) == []


def test_anti_diagonal_preference():
    assert hungarian([[5, 0], [0, 5]]) == [1, 0]


def test_random_integer_matrices_are_optimal():
    rng = random.Random(42)
    for _ in range(60):
        n = rng.randint(1, 6)
        cost = [[rng.randint(-20, 50) for _ in range(n)] for _ in range(n)]
        result = hungarian(cost)
        assert sorted(result) == list(range(n))
        assert _total(cost, result) == _best(cost)


def test_random_float_matrices_are_optimal():
    rng = random.Random(5)
    for _ in range(30):
        n = rng.randint(1, 5)
        cost = [[rng.uniform(0, 10) for _ in range(n)] for _ in range(n)]
        result = hungarian(cost)
        assert sorted(result) == list(range(n))
        assert _total(cost, result) == pytest.approx(_best(cost))


def test_non_square_rejected():
    with pytest.raises(ValueError):
        hungarian([[1, 2, 3], [4, 5, 6]])