"""Modular integers and binomial coefficient tables."""

from __future__ import annotations

from typing import List, Optional

from algokit.primes import extended_gcd

MOD = 10**9 + 7


class ModInt:
    """Integer modulo ``mod``; mixes freely with plain ints."""

    __slots__ = ("val", "mod")

    def __init__(self, value: int = 0, mod: int = MOD) -> None:
        if mod < 1:
            raise ValueError("modulus must be positive")
        self.mod = mod
        self.val = int(value) % mod

    def _coerce(self, other) -> Optional[int]:
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError(f"moduli differ: {self.mod} and {other.mod}")
            return other.val
        if isinstance(other, int):
            return other % self.mod
        return None

    def __add__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return ModInt(self.val + v, self.mod)

    __radd__ = __add__

    def __sub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return ModInt(self.val - v, self.mod)

    def __rsub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return ModInt(v - self.val, self.mod)

    def __mul__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return ModInt(self.val * v, self.mod)

    __rmul__ = __mul__

    def __truediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self * ModInt(v, self.mod).inv()

    def __rtruediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return ModInt(v, self.mod) * self.inv()

    def __neg__(self) -> "ModInt":
        return ModInt(-self.val, self.mod)

    def __pow__(self, exponent: int) -> "ModInt":
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        return ModInt(pow(self.val, exponent, self.mod), self.mod)

    def __eq__(self, other) -> bool:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self.val == v

    def __hash__(self) -> int:
        return hash(self.val)

    def __bool__(self) -> bool:
        return self.val != 0

    def __int__(self) -> int:
        return self.val

    def __repr__(self) -> str:
        return f"ModInt({self.val}, mod={self.mod})"

    def __str__(self) -> str:
        return str(self.val)

    def inv(self) -> "ModInt":
        """Multiplicative inverse; ZeroDivisionError when none exists."""
        g, x, _ = extended_gcd(self.val, self.mod)
        if g != 1:
            raise ZeroDivisionError(f"{self.val} has no inverse modulo {self.mod}")
        return ModInt(x, self.mod)


class Combinatorics:
    """Factorials, inverse factorials, inverses and powers of ``base`` for ``0 .. n``.

    The modulus must be prime and larger than ``n``.
    """

    def __init__(self, n: int, mod: int = MOD, base: int = 2) -> None:
        if n < 0:
            raise ValueError("table size must be non-negative")
        if n >= mod:
            raise ValueError("table size must stay below the modulus")
        self.n = n
        self.mod = mod
        one = ModInt(1, mod)
        fac: List[ModInt] = [one]
        for i in range(1, n + 1):
            fac.append(fac[-1] * i)
        ifac: List[ModInt] = [one] * (n + 1)
        ifac[n] = fac[n].inv()
        for i in range(n, 0, -1):
            ifac[i - 1] = ifac[i] * i
        self.fac = fac
        self.ifac = ifac
        self.inv = [one] + [ifac[i] * fac[i - 1] for i in range(1, n + 1)]
        powers = [one]
        for _ in range(n):
            powers.append(powers[-1] * base)
        self.powers = powers

    def ncr(self, n: int, r: int) -> ModInt:
        """Binomial coefficient ``n choose r``; zero outside ``0 <= r <= n``."""
        if n < 0 or r < 0 or n < r:
            return ModInt(0, self.mod)
        if n > self.n:
            raise IndexError(f"n={n} exceeds table size {self.n}")
        return self.fac[n] * self.ifac[r] * self.ifac[n - r]