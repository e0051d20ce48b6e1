"""Primality testing, integer factorisation and the extended Euclidean algorithm."""

from __future__ import annotations

import math
import random
from typing import List, Tuple

from algokit.sieve import simple_sieve

_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
_SMALL_PRIMES = simple_sieve(1000)
_rng = random.Random()


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for every n below 3.3e24."""
    if n < 2:
        return False
    for a in _BASES:
        if n % a == 0:
            return n == a
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _BASES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def pollard_rho(n: int) -> int:
    """A non-trivial divisor of the composite ``n`` (Brent's variant)."""
    if n < 4 or is_prime(n):
        raise ValueError(f"{n} has no non-trivial divisor")
    if n % 2 == 0:
        return 2
    batch = 128
    while True:
        c = _rng.randrange(1, n)
        y = _rng.randrange(0, n)
        g = r = q = 1
        x = ys = y
        while g == 1:
            x = y
            for _ in range(r):
                y = (y * y + c) % n
            k = 0
            while k < r and g == 1:
                ys = y
                for _ in range(min(batch, r - k)):
                    y = (y * y + c) % n
                    q = q * abs(x - y) % n
                g = math.gcd(q, n)
                k += batch
            r *= 2
        if g == n:
            g = 1
            while g == 1:
                ys = (ys * ys + c) % n
                g = math.gcd(abs(x - ys), n)
        if g != n:
            return g


def factorize(n: int) -> List[int]:
    """Prime factors of ``n`` with multiplicity, in increasing order."""
    if n < 1:
        raise ValueError("only positive integers can be factorised")
    factors: List[int] = []
    for p in _SMALL_PRIMES:
        while n % p == 0:
            factors.append(p)
            n //= p
    pending = [n] if n > 1 else []
    while pending:
        m = pending.pop()
        if is_prime(m):
            factors.append(m)
            continue
        d = pollard_rho(m)
        pending.extend((d, m // d))
    return sorted(factors)


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """``(g, x, y)`` with ``a * x + b * y == g`` and ``abs(g) == gcd(a, b)``."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y