"""Iterative bottom-up segment tree over an associative operation."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class SegTree(Generic[T]):
    """Point-assignment, range-product segment tree for a monoid ``(op, identity)``.

    Ranges are half-open: ``prod(left, right)`` combines positions
    ``left .. right - 1`` in order.
    """

    def __init__(
        self,
        n: int,
        op: Callable[[T, T], T],
        identity: T,
        values: Optional[Iterable[T]] = None,
    ) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._n = n
        self._op = op
        self._identity = identity
        size = 1
        while size < n:
            size <<= 1
        self._size = size
        self._log = size.bit_length() - 1
        self._d = [identity] * (2 * size)
        if values is not None:
            items = list(values)
            if len(items) != n:
                raise ValueError(f"expected {n} values, got {len(items)}")
            self._d[size:size + n] = items
            for k in range(size - 1, 0, -1):
                self._update(k)

    def __len__(self) -> int:
        return self._n

    def _update(self, k: int) -> None:
        self._d[k] = self._op(self._d[2 * k], self._d[2 * k + 1])

    def _check_index(self, p: int) -> None:
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range for size {self._n}")

    def set(self, p: int, value: T) -> None:
        """Assign ``value`` to position ``p``."""
        self._check_index(p)
        p += self._size
        self._d[p] = value
        for i in range(1, self._log + 1):
            self._update(p >> i)

    def get(self, p: int) -> T:
        """Return the value stored at position ``p``."""
        self._check_index(p)
        return self._d[p + self._size]

    def prod(self, left: int, right: int) -> T:
        """Combine the values in ``[left, right)``; the identity for an empty range."""
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) invalid for size {self._n}")
        if left == right:
            return self._identity
        op, d = self._op, self._d
        left += self._size
        right += self._size
        sml = self._identity
        smr = self._identity
        while left < right:
            if left & 1:
                sml = op(sml, d[left])
                left += 1
            if right & 1:
                right -= 1
                smr = op(d[right], smr)
            left >>= 1
            right >>= 1
        return op(sml, smr)