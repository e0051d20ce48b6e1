"""Bitmask helpers and sum-over-subsets counting."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple


def sos_counts(values: Iterable[int], bits: int) -> Tuple[List[int], List[int]]:
    """Subset and superset counts over all masks of ``bits`` bits.

    Returns ``(sub, sup)`` where ``sub[mask]`` counts values that are submasks
    of ``mask`` and ``sup[mask]`` counts values that are supermasks of it.
    """
    if bits < 0:
        raise ValueError("bit count must be non-negative")
    size = 1 << bits
    sub = [0] * size
    sup = [0] * size
    for v in values:
        if not 0 <= v < size:
            raise ValueError(f"value {v} does not fit in {bits} bits")
        sub[v] += 1
        sup[v] += 1
    for bit in range(bits):
        step = 1 << bit
        for mask in range(size):
            if mask & step:
                sub[mask] += sub[mask ^ step]
            else:
                sup[mask] += sup[mask | step]
    return sub, sup


def subsets(mask: int) -> Iterator[int]:
    """Non-empty submasks of ``mask`` in decreasing order."""
    if mask < 0:
        raise ValueError("mask must be non-negative")
    sub = mask
    while sub:
        yield sub
        sub = (sub - 1) & mask


def is_pow2(mask: int) -> bool:
    """Whether ``mask`` is a positive power of two."""
    return mask > 0 and mask & (mask - 1) == 0


def lowest_bit(mask: int) -> int:
    """The least significant set bit of ``mask`` as a value; 0 for 0."""
    return mask & -mask


def clear_lowest_bit(mask: int) -> int:
    """``mask`` with its least significant set bit cleared."""
    return mask & (mask - 1)