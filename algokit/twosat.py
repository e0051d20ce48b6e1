"""2-SAT solver over implication graphs."""

from __future__ import annotations

from typing import List, Optional

from algokit.scc import kosaraju


class TwoSat:
    """Boolean constraints on variables ``0 .. n - 1``.

    A literal is a variable ``i`` with a flag: True means ``x_i``, False means ``not x_i``.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("variable count must be non-negative")
        self._n = n
        self._adj: List[List[int]] = [[] for _ in range(2 * n)]

    def __len__(self) -> int:
        return self._n

    def _node(self, i: int, positive: bool) -> int:
        if not 0 <= i < self._n:
            raise IndexError(f"variable {i} out of range for {self._n} variables")
        return i if positive else i + self._n

    def add_or(self, i: int, f: bool, j: int, g: bool) -> None:
        """At least one of the two literals is true."""
        self._adj[self._node(i, not f)].append(self._node(j, g))
        self._adj[self._node(j, not g)].append(self._node(i, f))

    def add_xor(self, i: int, f: bool, j: int, g: bool) -> None:
        """Exactly one of the two literals is true."""
        self.add_or(i, f, j, g)
        self.add_or(i, not f, j, not g)

    def add_equal(self, i: int, f: bool, j: int, g: bool) -> None:
        """Both literals have the same value."""
        self.add_xor(i, not f, j, g)

    def solve(self) -> Optional[List[bool]]:
        """A satisfying assignment, or None when the constraints contradict."""
        comp = kosaraju(self._adj)
        n = self._n
        if any(comp[i] == comp[i + n] for i in range(n)):
            return None
        return [comp[i] > comp[i + n] for i in range(n)]