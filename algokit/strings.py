"""String algorithms: polynomial hashing, Manacher and the prefix function."""

from __future__ import annotations

from typing import List, Tuple


class PolyHash:
    """Prefix polynomial hashes of a string for O(1) substring hashes."""

    def __init__(self, s: str, base: int = 131, mod: int = 10**9 + 7) -> None:
        self._mod = mod
        self._hash: List[int] = []
        self._pow: List[int] = []
        h = 0
        p = 1
        for i, ch in enumerate(s):
            h = (h * base + ord(ch)) % mod if i else ord(ch) % mod
            if i:
                p = p * base % mod
            self._hash.append(h)
            self._pow.append(p)

    def __len__(self) -> int:
        return len(self._hash)

    def get(self, left: int, right: int) -> int:
        """Hash of the substring ``left .. right`` inclusive."""
        if not 0 <= left <= right < len(self._hash):
            raise IndexError(f"range [{left}, {right}] invalid for length {len(self._hash)}")
        if left == 0:
            return self._hash[right]
        return (self._hash[right] - self._hash[left - 1] * self._pow[right - left + 1]) % self._mod


def manacher_odd(s: str) -> List[int]:
    """Radius (centre included) of the longest odd palindrome centred at each index.

    The palindrome at ``i`` has length ``2 * d[i] - 1``.
    """
    n = len(s)
    d = [0] * n
    left = right = 0
    for i in range(n):
        k = min(right - i, d[left + right - i]) if i < right else 0
        while i - k >= 0 and i + k < n and s[i - k] == s[i + k]:
            k += 1
        d[i] = k
        if i + k > right:
            left, right = i - k, i + k
    return d


def manacher(s: str) -> List[int]:
    """Combined palindrome radii of length ``2 * len(s) - 1``.

    ``r[2*i] - 1`` is the longest odd palindrome centred at ``i`` and
    ``r[2*i + 1] - 1`` the longest even palindrome between ``i`` and ``i + 1``.
    """
    interleaved = "#" + "#".join(s) + "#"
    return manacher_odd(interleaved)[1:-1]


def manacher_pairs(s: str) -> Tuple[List[int], List[int]]:
    """``(even, odd)`` half-lengths of palindromes.

    ``even[i]`` (length ``n + 1``) is half the longest even palindrome centred
    between ``i - 1`` and ``i``; ``odd[i]`` is half the longest odd one centred
    at ``i``, rounded down.
    """
    n = len(s)
    result = [[0] * (n + 1), [0] * n]
    for z in (0, 1):
        p = result[z]
        shift = 0 if z else 1
        left = right = 0
        for i in range(n):
            t = right - i + shift
            if i < right:
                p[i] = min(t, p[left + t])
            lo = i - p[i]
            hi = i + p[i] - shift
            while lo >= 1 and hi + 1 < n and s[lo - 1] == s[hi + 1]:
                p[i] += 1
                lo -= 1
                hi += 1
            if hi > right:
                left, right = lo, hi
    return result[0], result[1]


def prefix_function(s: str) -> List[int]:
    """Length of the longest proper prefix of ``s[:i+1]`` that is also its suffix."""
    pi = [0] * len(s)
    for i in range(1, len(s)):
        j = pi[i - 1]
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi