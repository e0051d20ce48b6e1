"""Ordered set with rank queries."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from sortedcontainers import SortedSet


class OrderedSet:
    """Sorted set of unique values supporting k-th element and rank lookups."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._items = SortedSet(values or ())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: Any) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def add(self, value: Any) -> None:
        """Insert ``value`` if absent."""
        self._items.add(value)

    def discard(self, value: Any) -> None:
        """Remove ``value`` if present."""
        self._items.discard(value)

    def find_by_order(self, k: int) -> Any:
        """The ``k``-th smallest value, counting from zero."""
        if not 0 <= k < len(self._items):
            raise IndexError(f"order {k} out of range for size {len(self._items)}")
        return self._items[k]

    def order_of_key(self, value: Any) -> int:
        """Number of elements strictly smaller than ``value``."""
        return self._items.bisect_left(value)