"""Binary trie over fixed-width integers for XOR queries."""

from __future__ import annotations

from typing import Dict, List, Tuple

from sortedcontainers import SortedList


class BinaryTrie:
    """Multiset of ``(value, ident)`` pairs keyed by the bits ``bits .. 0`` of the value."""

    def __init__(self, bits: int = 30) -> None:
        if bits < 0:
            raise ValueError("bit index must be non-negative")
        self._bits = bits
        self._children: List[List[int]] = [[-1, -1]]
        self._count: List[int] = [0]
        self._ids: Dict[int, SortedList] = {}

    def __len__(self) -> int:
        return self._count[0]

    def _check(self, x: int) -> None:
        if not 0 <= x < 1 << (self._bits + 1):
            raise ValueError(f"value {x} does not fit in {self._bits + 1} bits")

    def _bit_range(self):
        return range(self._bits, -1, -1)

    def insert(self, x: int, ident: int) -> None:
        """Add value ``x`` tagged with ``ident``."""
        self._check(x)
        cur = 0
        self._count[cur] += 1
        for i in self._bit_range():
            b = (x >> i) & 1
            if self._children[cur][b] == -1:
                self._children.append([-1, -1])
                self._count.append(0)
                self._children[cur][b] = len(self._count) - 1
            cur = self._children[cur][b]
            self._count[cur] += 1
        self._ids.setdefault(cur, SortedList()).add(ident)

    def remove(self, x: int, ident: int) -> None:
        """Remove one ``(x, ident)`` pair; KeyError if it is not present."""
        self._check(x)
        path = [0]
        cur = 0
        for i in self._bit_range():
            cur = self._children[cur][(x >> i) & 1]
            if cur == -1:
                raise KeyError((x, ident))
            path.append(cur)
        ids = self._ids.get(cur)
        if not ids or ident not in ids:
            raise KeyError((x, ident))
        ids.remove(ident)
        for node in path:
            self._count[node] -= 1

    def _live(self, node: int) -> bool:
        return node != -1 and self._count[node] > 0

    def min_xor(self, x: int) -> Tuple[int, int]:
        """Smallest ``x ^ v`` over stored values and the smallest ident holding that ``v``."""
        self._check(x)
        if not self._count[0]:
            raise ValueError("trie is empty")
        cur = 0
        result = 0
        for i in self._bit_range():
            b = (x >> i) & 1
            child = self._children[cur][b]
            if self._live(child):
                cur = child
            else:
                result |= 1 << i
                cur = self._children[cur][b ^ 1]
        return result, self._ids[cur][0]

    def max_xor(self, x: int) -> int:
        """Largest ``x ^ v`` over stored values."""
        self._check(x)
        if not self._count[0]:
            raise ValueError("trie is empty")
        cur = 0
        result = 0
        for i in self._bit_range():
            b = (x >> i) & 1
            child = self._children[cur][b ^ 1]
            if self._live(child):
                result |= 1 << i
                cur = child
            else:
                cur = self._children[cur][b]
        return result