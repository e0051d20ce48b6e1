"""Gaussian elimination over GF(2) with rows stored as integer bitmasks."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple


def gf2_eliminate(rows: Iterable[int], ncols: int) -> Tuple[List[int], int]:
    """Reduce ``rows`` to reduced row echelon form on columns ``0 .. ncols - 1``.

    Bit ``c`` of a row is its entry in column ``c``; higher bits, such as an
    augmented right-hand side in bit ``ncols``, are carried along. Returns the
    reduced rows and the rank.
    """
    if ncols < 0:
        raise ValueError("column count must be non-negative")
    mat = list(rows)
    if any(r < 0 for r in mat):
        raise ValueError("rows must be non-negative bitmasks")
    rank = 0
    for col in range(ncols):
        if rank == len(mat):
            break
        bit = 1 << col
        sel = next((r for r in range(rank, len(mat)) if mat[r] & bit), None)
        if sel is None:
            continue
        mat[rank], mat[sel] = mat[sel], mat[rank]
        pivot = mat[rank]
        mat = [
            row ^ pivot if r != rank and row & bit else row
            for r, row in enumerate(mat)
        ]
        rank += 1
    return mat, rank


def gf2_consistent(rows: Iterable[int], ncols: int) -> bool:
    """Whether the augmented system with right-hand side in bit ``ncols`` has a solution."""
    reduced, _ = gf2_eliminate(rows, ncols)
    mask = (1 << ncols) - 1
    return not any(row & mask == 0 and (row >> ncols) & 1 for row in reduced)


def can_balance(p: int, edges: Iterable[Sequence[int]]) -> bool:
    """Whether the parity system built from the graph on ``0 .. p - 1`` is solvable.

    Vertex ``v`` contributes the equation: the sum of ``x_u`` over its
    neighbours, plus ``x_v`` itself when its degree is odd, equals 1 when its
    degree is even and 0 when it is odd (all modulo 2).
    """
    if p < 0:
        raise ValueError("vertex count must be non-negative")
    rows = [0] * p
    degree = [0] * p
    for a, b in edges:
        if not (0 <= a < p and 0 <= b < p):
            raise IndexError(f"edge {(a, b)} has a vertex out of range")
        rows[a] |= 1 << b
        rows[b] |= 1 << a
        degree[a] += 1
        degree[b] += 1
    for v in range(p):
        rows[v] |= 1 << v if degree[v] % 2 else 1 << p
    return gf2_consistent(rows, p)