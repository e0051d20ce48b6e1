"""Prime sieves and Euler's totient function."""

from __future__ import annotations

from math import isqrt
from typing import List


class Sieve:
    """Smallest prime factor, totient and Möbius tables for ``0 .. limit``.

    ``spf[n]`` is the smallest prime factor of ``n`` (0 for ``n < 2``),
    ``phi[n]`` is Euler's totient, ``mu[n]`` the Möbius function and
    ``primes`` the primes up to ``limit`` in increasing order.
    """

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        size = limit + 1
        spf = [0] * size
        phi = list(range(size))
        mu = [1] * size
        mu[0] = 0
        primes: List[int] = []
        for i in range(2, size):
            if spf[i]:
                continue
            primes.append(i)
            for j in range(i, size, i):
                if spf[j] == 0:
                    spf[j] = i
                phi[j] -= phi[j] // i
                mu[j] = 0 if (j // i) % i == 0 else -mu[j]
        self.spf = spf
        self.phi = phi
        self.mu = mu
        self.primes = primes

    def __len__(self) -> int:
        return self.limit + 1


def phi(n: int) -> int:
    """Euler's totient of ``n`` by trial division; ``phi(0) == 0``."""
    if n < 0:
        raise ValueError("totient is defined for non-negative integers")
    result = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            result -= result // i
        i += 1
    if n > 1:
        result -= result // n
    return result


def phi_table(n: int) -> List[int]:
    """Totients of ``0 .. n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    table = list(range(n + 1))
    for i in range(2, n + 1):
        if table[i] == i:
            for j in range(i, n + 1, i):
                table[j] -= table[j] // i
    return table


def simple_sieve(limit: int) -> List[int]:
    """Primes up to ``limit`` inclusive."""
    if limit < 2:
        return []
    flags = bytearray([1]) * (limit + 1)
    flags[0] = flags[1] = 0
    for p in range(2, isqrt(limit) + 1):
        if flags[p]:
            flags[p * p::p] = bytes(len(range(p * p, limit + 1, p)))
    return [i for i, flag in enumerate(flags) if flag]


def segmented_sieve(low: int, high: int) -> List[int]:
    """Primes in ``low .. high`` inclusive, using primes up to ``sqrt(high)``."""
    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    lo = max(low, 2)
    if lo > high:
        return []
    flags = bytearray([1]) * (high - lo + 1)
    for p in simple_sieve(isqrt(high)):
        start = max(p * p, -(-lo // p) * p)
        if start > high:
            continue
        flags[start - lo::p] = bytes(len(range(start, high + 1, p)))
    return [lo + i for i, flag in enumerate(flags) if flag]