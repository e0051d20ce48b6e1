"""Minimum excluded value, one-shot and under point updates."""

from __future__ import annotations

from collections import Counter
from itertools import count
from typing import Iterable

from sortedcontainers import SortedSet


def calc_mex(values: Iterable[int]) -> int:
    """Smallest non-negative integer not among ``values``."""
    present = set(values)
    return next(i for i in count() if i not in present)


class Mex:
    """Array whose mex is maintained under point assignments."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._frequency = Counter(self._values)
        self._missing = SortedSet(range(len(self._values) + 1))
        self._missing.difference_update(self._frequency)

    def mex(self) -> int:
        """Current mex of the array."""
        return self._missing[0]

    def update(self, idx: int, value: int) -> None:
        """Assign ``value`` to position ``idx``."""
        old = self._values[idx]
        self._frequency[old] -= 1
        if self._frequency[old] == 0:
            del self._frequency[old]
            if old >= 0:
                self._missing.add(old)
        self._values[idx] = value
        self._frequency[value] += 1
        self._missing.discard(value)