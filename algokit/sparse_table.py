"""Sparse table for idempotent range queries."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


def log_floor(x: int) -> int:
    """Floor of log2(x); -1 for zero."""
    return x.bit_length() - 1 if x else -1


class SparseTable(Generic[T]):
    """O(1) range queries for an idempotent function such as min, max or gcd."""

    def __init__(self, values: Iterable[T], func: Callable[[T, T], T]) -> None:
        base = list(values)
        self._n = len(base)
        self._func = func
        levels = log_floor(self._n) + 1
        self._table = [base] if levels > 0 else []
        for i in range(1, levels):
            prev = self._table[-1]
            half = 1 << (i - 1)
            self._table.append([func(a, b) for a, b in zip(prev, prev[half:])])

    def __len__(self) -> int:
        return self._n

    def query(self, left: int, right: int) -> T:
        """Combine positions ``left .. right`` inclusive."""
        if not 0 <= left <= right < self._n:
            raise IndexError(f"range [{left}, {right}] invalid for size {self._n}")
        h = log_floor(right - left + 1)
        row = self._table[h]
        return self._func(row[left], row[right - (1 << h) + 1])