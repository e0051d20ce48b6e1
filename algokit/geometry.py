"""Euclidean vectors of any dimension and point-segment distance."""

from __future__ import annotations

import math
from typing import Iterator


class Vec:
    """Immutable vector with component-wise arithmetic."""

    __slots__ = ("_coords",)

    def __init__(self, *coords: float) -> None:
        self._coords = tuple(coords)

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[float]:
        return iter(self._coords)

    def __getitem__(self, i: int) -> float:
        return self._coords[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return self._coords == other._coords

    def __hash__(self) -> int:
        return hash(self._coords)

    def __repr__(self) -> str:
        return f"Vec{self._coords!r}"

    def _zip(self, other: "Vec"):
        if len(self._coords) != len(other._coords):
            raise ValueError(f"dimensions differ: {len(self)} and {len(other)}")
        return zip(self._coords, other._coords)

    def __add__(self, other: "Vec") -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(*(a + b for a, b in self._zip(other)))

    def __sub__(self, other: "Vec") -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(*(a - b for a, b in self._zip(other)))

    def __mul__(self, scalar: float) -> "Vec":
        if isinstance(scalar, Vec):
            return NotImplemented
        return Vec(*(a * scalar for a in self._coords))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec":
        if isinstance(scalar, Vec):
            return NotImplemented
        return Vec(*(a / scalar for a in self._coords))

    def dot(self, other: "Vec") -> float:
        """Inner product."""
        return sum(a * b for a, b in self._zip(other))

    def norm_sq(self) -> float:
        """Squared Euclidean length."""
        return sum(a * a for a in self._coords)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.norm_sq())


def segment_distance(p: Vec, a: Vec, b: Vec) -> float:
    """Distance from point ``p`` to the segment from ``a`` to ``b``."""
    ab = b - a
    ap = p - a
    length_sq = ab.norm_sq()
    if length_sq < 1e-12:
        return ap.norm()
    t = min(1.0, max(0.0, ap.dot(ab) / length_sq))
    return (a + ab * t - p).norm()