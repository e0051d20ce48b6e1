"""Minimum-cost perfect assignment with the Hungarian algorithm."""

from __future__ import annotations

import math
from typing import List, Sequence


def hungarian(cost: Sequence[Sequence[float]]) -> List[int]:
    """Assignment of minimum total cost for a square cost matrix.

    ``result[i] == j`` means worker ``i`` takes task ``j``. Runs in O(n^3).
    """
    a = [list(row) for row in cost]
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("cost matrix must be square")
    u = [0] * (n + 1)
    v = [0] * (n + 1)
    p = [0] * (n + 1)
    way = [0] * (n + 1)
    for i in range(1, n + 1):
        p[0] = i
        j0 = 0
        minv = [math.inf] * (n + 1)
        used = [False] * (n + 1)
        while True:
            used[j0] = True
            i0 = p[j0]
            delta = math.inf
            j1 = 0
            row = a[i0 - 1]
            for j in range(1, n + 1):
                if used[j]:
                    continue
                cur = row[j - 1] - u[i0] - v[j]
                if cur < minv[j]:
                    minv[j] = cur
                    way[j] = j0
                if minv[j] < delta:
                    delta = minv[j]
                    j1 = j
            for j in range(n + 1):
                if used[j]:
                    u[p[j]] += delta
                    v[j] -= delta
                else:
                    minv[j] -= delta
            j0 = j1
            if p[j0] == 0:
                break
        while j0:
            j1 = way[j0]
            p[j0] = p[j1]
            j0 = j1
    result = [0] * n
    for j in range(1, n + 1):
        result[p[j] - 1] = j - 1
    return result