import pytest

from algokit.fenwick import FenwickTree

VALUES = [5, 3, 7, 9, 6, 4, 1, 2]


def test_prefix_sums():
    tree = FenwickTree(VALUES)
    for right in range(len(VALUES)):
        assert tree.prefix_sum(right) == sum(VALUES[:right + 1])
    assert tree.prefix_sum(-1) == 0


def test_range_sums():
    tree = FenwickTree(VALUES)
    for left in range(len(VALUES)):
        for right in range(left, len(VALUES)):
            assert tree.range_sum(left, right) == sum(VALUES[left:right + 1])


def test_add_updates():
    ref = [0] * 10
    tree = FenwickTree(10)
    for idx, delta in [(0, 4), (9, -3), (4, 8), (4, 1), (7, 2)]:
        tree.add(idx, delta)
        ref[idx] += delta
        assert tree.range_sum(0, 9) == sum(ref)
        assert tree.range_sum(3, 7) == sum(ref[3:8])
    assert len(tree) == len(ref)


def test_add_out_of_range():
    tree = FenwickTree(3)
    with pytest.raises(IndexError):
        tree.add(3, 1)