"""Convex hull trick structures for line minimum and maximum queries."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from fractions import Fraction
from typing import List


class MonotoneCHT:
    """Lower envelope of lines added with non-increasing slopes; queries the minimum."""

    def __init__(self) -> None:
        self._slopes: List = []
        self._intercepts: List = []
        self._points: List = []

    def __len__(self) -> int:
        return len(self._slopes)

    def _cross(self, m, c, k: int) -> Fraction:
        other_m, other_c = self._slopes[k], self._intercepts[k]
        return Fraction(other_c - c) / Fraction(m - other_m)

    def _pop(self) -> None:
        self._slopes.pop()
        self._intercepts.pop()
        self._points.pop()

    def add_line(self, m, c) -> None:
        """Add the line ``y = m * x + c``; its slope must not exceed the last one."""
        if self._slopes and m > self._slopes[-1]:
            raise ValueError("slopes must be added in non-increasing order")
        if self._slopes and m == self._slopes[-1]:
            if self._intercepts[-1] <= c:
                return
            self._pop()
        while len(self._slopes) >= 2 and self._cross(m, c, -2) <= self._points[-1]:
            self._pop()
        self._points.append(self._cross(m, c, -1) if self._slopes else -math.inf)
        self._slopes.append(m)
        self._intercepts.append(c)

    def query(self, x):
        """Minimum of ``m * x + c`` over all lines."""
        if not self._slopes:
            raise ValueError("no lines have been added")
        idx = bisect_right(self._points, x) - 1
        return self._slopes[idx] * x + self._intercepts[idx]


class LineContainer:
    """Upper envelope of integer lines added in any order; queries the maximum."""

    def __init__(self) -> None:
        self._ks: List[int] = []
        self._ms: List[int] = []
        self._ps: List = []

    def __len__(self) -> int:
        return len(self._ks)

    def _erase(self, i: int) -> None:
        self._ks.pop(i)
        self._ms.pop(i)
        self._ps.pop(i)

    def _isect(self, x: int, y: int) -> bool:
        if y == len(self._ks):
            self._ps[x] = math.inf
            return False
        if self._ks[x] == self._ks[y]:
            self._ps[x] = math.inf if self._ms[x] > self._ms[y] else -math.inf
        else:
            self._ps[x] = (self._ms[y] - self._ms[x]) // (self._ks[x] - self._ks[y])
        return self._ps[x] >= self._ps[y]

    def add(self, k: int, m: int) -> None:
        """Add the line ``y = k * x + m``."""
        y = bisect_right(self._ks, k)
        self._ks.insert(y, k)
        self._ms.insert(y, m)
        self._ps.insert(y, 0)
        while self._isect(y, y + 1):
            self._erase(y + 1)
        x = y
        if x != 0:
            x -= 1
            if self._isect(x, y):
                self._erase(y)
                self._isect(x, y)
        while True:
            y = x
            if y == 0:
                break
            x -= 1
            if self._ps[x] < self._ps[y]:
                break
            self._erase(y)
            self._isect(x, y)

    def query(self, x: int) -> int:
        """Maximum of ``k * x + m`` over all lines."""
        if not self._ks:
            raise ValueError("no lines have been added")
        i = bisect_left(self._ps, x)
        return self._ks[i] * x + self._ms[i]