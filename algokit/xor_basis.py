"""Linear basis of integers over GF(2)."""

from __future__ import annotations


class XorBasis:
    """Basis of the XOR span of inserted values, over the low ``bits`` bits."""

    def __init__(self, bits: int = 20) -> None:
        self._bits = bits
        self._basis = [0] * bits
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, x: int) -> bool:
        """Add ``x`` to the span; True if it enlarged the basis."""
        for i in reversed(range(self._bits)):
            if (x >> i) & 1:
                if not self._basis[i]:
                    self._basis[i] = x
                    self._size += 1
                    return True
                x ^= self._basis[i]
        return False

    def query(self, x: int) -> bool:
        """Whether ``x`` is the XOR of some subset of inserted values."""
        for i in reversed(range(self._bits)):
            if x == 0:
                return True
            if (x >> i) & 1:
                if not self._basis[i]:
                    return False
                x ^= self._basis[i]
        return x == 0