"""Recursive segment tree with lazy propagation."""

from __future__ import annotations

import math
import operator
from typing import Any, Callable, Iterable, Union


class LazySegTree:
    """Segment tree supporting point assignment, range queries and range updates.

    ``merge`` combines two nodes, ``apply(node, lazy)`` applies a pending
    update to a node and ``compose(lazy, new)`` stacks two updates.
    Ranges are half-open ``[ql, qr)``.
    """

    def __init__(
        self,
        values: Union[int, Iterable[Any]],
        merge: Callable[[Any, Any], Any],
        identity: Any,
        apply: Callable[[Any, Any], Any],
        compose: Callable[[Any, Any], Any],
        lazy_identity: Any,
    ) -> None:
        if isinstance(values, int):
            n, initial = values, None
        else:
            initial = list(values)
            n = len(initial)
        if n < 1:
            raise ValueError("tree needs at least one element")
        self._n = n
        self._merge = merge
        self._identity = identity
        self._apply_fn = apply
        self._compose = compose
        self._lazy_identity = lazy_identity
        capacity = 4 << (n.bit_length() - 1)
        self._tree = [identity] * capacity
        self._lazy = [lazy_identity] * capacity
        if initial is not None:
            self._build(1, 0, n, initial)

    def __len__(self) -> int:
        return self._n

    def _build(self, node: int, st: int, en: int, init: list) -> None:
        if en - st == 1:
            self._tree[node] = init[st]
            return
        md = (st + en) >> 1
        self._build(node << 1, st, md, init)
        self._build(node << 1 | 1, md, en, init)
        self._pull(node)

    def _pull(self, node: int) -> None:
        self._tree[node] = self._merge(self._tree[node << 1], self._tree[node << 1 | 1])

    def _apply(self, node: int, lazy: Any) -> None:
        self._tree[node] = self._apply_fn(self._tree[node], lazy)
        self._lazy[node] = self._compose(self._lazy[node], lazy)

    def _push(self, node: int) -> None:
        pending = self._lazy[node]
        self._apply(node << 1, pending)
        self._apply(node << 1 | 1, pending)
        self._lazy[node] = self._lazy_identity

    def update(self, idx: int, value: Any) -> None:
        """Assign ``value`` to position ``idx``."""
        if not 0 <= idx < self._n:
            raise IndexError(f"position {idx} out of range for size {self._n}")
        self._update(1, 0, self._n, idx, value)

    def _update(self, node: int, st: int, en: int, idx: int, value: Any) -> None:
        if en - st == 1:
            self._tree[node] = value
            return
        self._push(node)
        md = (st + en) >> 1
        if idx < md:
            self._update(node << 1, st, md, idx, value)
        else:
            self._update(node << 1 | 1, md, en, idx, value)
        self._pull(node)

    def range_query(self, ql: int, qr: int) -> Any:
        """Merge of the nodes in ``[ql, qr)``; the identity for an empty range."""
        return self._query(1, 0, self._n, ql, qr)

    def _query(self, node: int, st: int, en: int, ql: int, qr: int) -> Any:
        if st >= qr or en <= ql:
            return self._identity
        if st >= ql and en <= qr:
            return self._tree[node]
        self._push(node)
        md = (st + en) >> 1
        return self._merge(
            self._query(node << 1, st, md, ql, qr),
            self._query(node << 1 | 1, md, en, ql, qr),
        )

    def range_apply(self, ql: int, qr: int, lazy: Any) -> None:
        """Apply the update ``lazy`` to every position in ``[ql, qr)``."""
        self._range_apply(1, 0, self._n, ql, qr, lazy)

    def _range_apply(self, node: int, st: int, en: int, ql: int, qr: int, lazy: Any) -> None:
        if st >= qr or en <= ql:
            return
        if st >= ql and en <= qr:
            self._apply(node, lazy)
            return
        self._push(node)
        md = (st + en) >> 1
        self._range_apply(node << 1, st, md, ql, qr, lazy)
        self._range_apply(node << 1 | 1, md, en, ql, qr, lazy)
        self._pull(node)


def min_add_tree(values: Iterable[int]) -> LazySegTree:
    """Range-minimum tree with range-add updates."""
    return LazySegTree(values, min, math.inf, operator.add, operator.add, 0)