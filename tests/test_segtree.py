import pytest

from algokit.segtree import SegTree

VALUES = [5, 3, 8, 1, 9, 2, 7]


def test_sum_matches_slices():
    tree = SegTree(len(VALUES), lambda a, b: a + b, 0, VALUES)
    for left in range(len(VALUES) + 1):
        for right in range(left, len(VALUES) + 1):
            assert tree.prod(left, right) == sum(VALUES[left:right])


def test_empty_range_returns_identity():
    tree = SegTree(len(VALUES), min, float("inf"), VALUES)
    assert tree.prod(3, 3) == float("inf")


def test_non_commutative_order_preserved():
    letters = list("segmenttree")
    tree = SegTree(len(letters), lambda a, b: a + b, "", letters)
    for left in range(len(letters)):
        for right in range(left, len(letters) + 1):
            assert tree.prod(left, right) == "".join(letters[left:right])


def test_set_then_query():
    ref = list(VALUES)
    tree = SegTree(len(ref), min, float("inf"), ref)
    for pos, value in [(0, 10), (3, -4), (6, 0), (3, 20)]:
        tree.set(pos, value)
        ref[pos] = value
        assert tree.get(pos) == value
        assert tree.prod(0, len(ref)) == min(ref)
        assert tree.prod(2, 5) == min(ref[2:5])


def test_starts_with_identity():
    tree = SegTree(5, lambda a, b: a + b, 0)
    assert tree.prod(0, 5) == 0
    tree.set(4, 11)
    assert tree.prod(0, 5) == 11
    assert len(tree) == 5


@pytest.mark.parametrize("left,right", [(-1, 2), (3, 2), (0, 8)])
def test_bad_range(left, right):
    tree = SegTree(len(VALUES), lambda a, b: a + b, 0, VALUES)
    with pytest.raises(IndexError):
        tree.prod(left, right)


def test_bad_position_and_length():
    tree = SegTree(3, lambda a, b: a + b, 0)
    with pytest.raises(IndexError):
        tree.set(3, 1)
    with pytest.raises(ValueError):
        SegTree(3, lambda a, b: a + b, 0, [1, 2])