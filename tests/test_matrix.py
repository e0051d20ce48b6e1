import pytest

from algokit.matrix import Matrix, mat_pow
from algokit.modint import MOD, ModInt


def _fib(n):
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def test_rectangular_product():
    a = Matrix([[1, 2, 3], [4, 5, 6]])
    b = Matrix([[1], [0], [-1]])
    product = a @ b
    assert (product.n, product.m) == (2, 1)
    assert product == Matrix([[-2], [-2]])


def test_identity_is_neutral():
    m = Matrix([[2, -1, 0], [3, 4, 5], [7, 0, 1]])
    assert Matrix.identity(3) @ m == m
    assert m @ Matrix.identity(3) == m


def test_mat_pow_matches_repeated_product():
    m = Matrix([[1, 2], [3, 4]])
    assert mat_pow(m, 5) == m @ m @ m @ m @ m
    assert mat_pow(m, 1) == m
    assert mat_pow(m, 0) == Matrix.identity(2)


def test_fibonacci_with_modint():
    one, zero = ModInt(1), ModInt(0)
    q = Matrix([[one, one], [one, zero]])
    for n in (1, 2, 10, 90, 200):
        assert mat_pow(q, n)[0][1] == _fib(n) % MOD


def test_mat_pow_rejects_non_square():
    with pytest.raises(ValueError):
        mat_pow(Matrix([[1, 2, 3]]), 2)


def test_mat_pow_rejects_negative_exponent():
    with pytest.raises(ValueError):
        mat_pow(Matrix([[1]]), -1)


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) @ Matrix([[1, 2]])


def test_ragged_and_empty_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])
    with pytest.raises(ValueError):
        Matrix([])
    with pytest.raises(ValueError):
        Matrix.identity(0)