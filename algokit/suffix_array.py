"""Suffix array by prefix doubling, with the LCP array."""

from __future__ import annotations

from typing import List, Sequence, Union


class SuffixArray:
    """Suffix array of ``s`` including the empty suffix, which comes first.

    ``sa[i]`` is the start of the i-th smallest suffix and ``lcp[i]`` is the
    longest common prefix of suffixes ``sa[i]`` and ``sa[i - 1]`` (``lcp[0] == 0``).
    Symbols must be positive: characters of a string or positive integers.
    """

    def __init__(self, s: Union[str, Sequence[int]], lim: int = 256) -> None:
        codes = [ord(c) for c in s] if isinstance(s, str) else [int(c) for c in s]
        if any(c <= 0 for c in codes):
            raise ValueError("symbols must be positive")
        if codes:
            lim = max(lim, max(codes) + 1)
        arr = codes + [0]
        n = len(arr)
        x = arr[:]
        sa = list(range(n))
        j = 0
        p = 0
        while p < n:
            y = list(range(n - j, n)) + [v - j for v in sa if v >= j]
            ws = [0] * max(n, lim)
            for v in x:
                ws[v] += 1
            for i in range(1, lim):
                ws[i] += ws[i - 1]
            for i in reversed(range(n)):
                key = x[y[i]]
                ws[key] -= 1
                sa[ws[key]] = y[i]
            x, y = y, x
            p = 1
            x[sa[0]] = 0
            for i in range(1, n):
                a, b = sa[i - 1], sa[i]
                if y[a] == y[b] and y[a + j] == y[b + j]:
                    x[b] = p - 1
                else:
                    x[b] = p
                    p += 1
            j = max(1, j * 2)
            lim = p

        rank = [0] * n
        for i in range(1, n):
            rank[sa[i]] = i
        lcp = [0] * n
        k = 0
        for i in range(n - 1):
            if k:
                k -= 1
            other = sa[rank[i] - 1]
            while arr[i + k] == arr[other + k]:
                k += 1
            lcp[rank[i]] = k
        self.sa: List[int] = sa
        self.lcp: List[int] = lcp

    def __len__(self) -> int:
        return len(self.sa)