"""Dense matrices with multiplication and fast exponentiation."""

from __future__ import annotations

from typing import Any, Iterable


class Matrix:
    """Immutable matrix over any ring-like numbers (int, ModInt, Fraction)."""

    __slots__ = ("rows",)

    def __init__(self, rows: Iterable[Iterable[Any]]) -> None:
        data = tuple(tuple(row) for row in rows)
        if not data or not data[0]:
            raise ValueError("matrix needs at least one row and one column")
        if any(len(row) != len(data[0]) for row in data):
            raise ValueError("rows must all have the same length")
        self.rows = data

    @property
    def n(self) -> int:
        """Number of rows."""
        return len(self.rows)

    @property
    def m(self) -> int:
        """Number of columns."""
        return len(self.rows[0])

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """The ``n`` by ``n`` identity matrix."""
        if n < 1:
            raise ValueError("size must be positive")
        return cls([[1 if i == j else 0 for j in range(n)] for i in range(n)])

    def __getitem__(self, i: int):
        return self.rows[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.rows == other.rows

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self.rows]!r})"

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.m != other.n:
            raise ValueError(f"cannot multiply {self.n}x{self.m} by {other.n}x{other.m}")
        result = []
        for row in self.rows:
            out = [0] * other.m
            for a, other_row in zip(row, other.rows):
                if a == 0:
                    continue
                out = [o + a * b for o, b in zip(out, other_row)]
            result.append(out)
        return Matrix(result)


def mat_pow(a: Matrix, p: int) -> Matrix:
    """``a`` raised to the non-negative power ``p`` by repeated squaring."""
    if a.n != a.m:
        raise ValueError("only square matrices can be raised to a power")
    if p < 0:
        raise ValueError("exponent must be non-negative")
    result = Matrix.identity(a.n)
    while p:
        if p & 1:
            result = result @ a
        a = a @ a
        p >>= 1
    return result