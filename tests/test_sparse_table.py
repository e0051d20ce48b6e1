import math

import pytest

from algokit.sparse_table import SparseTable, log_floor

VALUES = [12, 18, 6, 30, 24, 9, 15, 3, 27, 21, 36]


def test_log_floor():
    assert log_floor(0) == -1
    for k in range(20):
        assert log_floor(1 << k) == k
        assert log_floor((1 << (k + 1)) - 1) == k


@pytest.mark.parametrize("func", [min, max, math.gcd])
def test_queries_match_builtins(func):
    table = SparseTable(VALUES, func)
    for left in range(len(VALUES)):
        for right in range(left, len(VALUES)):
            expected = VALUES[left]
            for value in VALUES[left + 1:right + 1]:
                expected = func(expected, value)
            assert table.query(left, right) == expected


def test_invalid_ranges():
    table = SparseTable(VALUES, min)
    with pytest.raises(IndexError):
        table.query(3, 2)
    with pytest.raises(IndexError):
        table.query(0, len(VALUES))
    empty = SparseTable([], min)
    assert len(empty) == 0
    with pytest.raises(IndexError):
        empty.query(0, 0)