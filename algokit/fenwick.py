"""Fenwick tree (binary indexed tree) for prefix sums."""

from __future__ import annotations

from typing import Iterable, Union


class FenwickTree:
    """Point-add, prefix-sum structure over zero-based positions."""

    def __init__(self, data: Union[int, Iterable[int]]) -> None:
        if isinstance(data, int):
            if data < 0:
                raise ValueError("size must be non-negative")
            self._bit = [0] * data
        else:
            values = list(data)
            self._bit = [0] * len(values)
            for idx, value in enumerate(values):
                self.add(idx, value)

    def __len__(self) -> int:
        return len(self._bit)

    def add(self, idx: int, delta: int) -> None:
        """Add ``delta`` to position ``idx``."""
        n = len(self._bit)
        if not 0 <= idx < n:
            raise IndexError(f"position {idx} out of range for size {n}")
        while idx < n:
            self._bit[idx] += delta
            idx |= idx + 1

    def prefix_sum(self, right: int) -> int:
        """Sum of positions ``0 .. right`` inclusive; zero when ``right`` is negative."""
        right = min(right, len(self._bit) - 1)
        total = 0
        while right >= 0:
            total += self._bit[right]
            right = (right & (right + 1)) - 1
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Sum of positions ``left .. right`` inclusive."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)