import math

import pytest

from algokit.sieve import Sieve, phi, phi_table, segmented_sieve, simple_sieve


def _has_divisor(n):
    return any(n % d == 0 for d in range(2, math.isqrt(n) + 1))


def test_simple_sieve_lists_exactly_the_primes():
    primes = simple_sieve(300)
    assert primes == sorted(primes)
    listed = set(primes)
    for n in range(2, 301):
        assert (n in listed) == (not _has_divisor(n))


def test_simple_sieve_edges():
    assert simple_sieve(1) == []
    assert simple_sieve(0) == []
    assert simple_sieve(2) == [2]


def test_phi_matches_definition():
    for n in range(1, 120):
        assert phi(n) == sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)


def test_phi_rejects_negative():
    with pytest.raises(ValueError):
        phi(-3)


def test_phi_table_agrees_with_phi():
    assert phi_table(80) == [phi(n) for n in range(81)]


def test_sieve_tables():
    s = Sieve(150)
    assert len(s) == 151
    assert s.primes == simple_sieve(150)
    assert s.phi[1:] == phi_table(150)[1:]
    prime_set = set(s.primes)
    for n in range(2, 151):
        p = s.spf[n]
        assert n % p == 0 and p in prime_set
        assert all(n % q for q in s.primes if q < p)


def test_mobius_divisor_sum():
    s = Sieve(120)
    for n in range(1, 121):
        total = sum(s.mu[d] for d in range(1, n + 1) if n % d == 0)
        assert total == (1 if n == 1 else 0)
    for p in s.primes:
        assert s.mu[p] == -1
        if p * p <= 120:
            assert s.mu[p * p] == 0


def test_sieve_rejects_negative_limit():
    with pytest.raises(ValueError):
        Sieve(-1)


@pytest.mark.parametrize(
    "low, high",
    [(0, 30), (1, 1), (2, 2), (90, 200), (10**6, 10**6 + 300), (17, 17), (24, 28)],
)
def test_segmented_sieve_matches_simple(low, high):
    expected = [p for p in simple_sieve(high) if p >= low]
    assert segmented_sieve(low, high) == expected


def test_segmented_sieve_rejects_reversed_range():
    with pytest.raises(ValueError):
        segmented_sieve(10, 5)