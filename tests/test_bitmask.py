import pytest

from algokit.bitmask import clear_lowest_bit, is_pow2, lowest_bit, sos_counts, subsets


def test_subsets_enumerates_all_submasks():
    mask = 0b1011
    found = list(subsets(mask))
    assert set(found) == {s for s in range(1, mask + 1) if s & ~mask == 0}
    assert found == sorted(found, reverse=True)
    assert len(found) == 2 ** bin(mask).count("1") - 1


def test_subsets_of_zero_is_empty():
    assert list(subsets(0)) == []


def test_subsets_rejects_negative():
    with pytest.raises(ValueError):
        list(subsets(-1))


def test_is_pow2():
    for k in range(40):
        assert is_pow2(1 << k)
    for n in (0, -4, 6, 12, (1 << 20) + 1):
        assert not is_pow2(n)


def test_lowest_bit_and_clear():
    for x in range(1, 300):
        low = lowest_bit(x)
        assert is_pow2(low)
        assert x % low == 0 and (x // low) % 2 == 1
        assert clear_lowest_bit(x) == x - low
    assert lowest_bit(0) == 0
    assert clear_lowest_bit(0) == 0


def test_sos_counts_match_definition():
    values = [1, 2, 3, 3, 0, 5, 7, 4]
    bits = 3
    sub, sup = sos_counts(values, bits)
    assert len(sub) == len(sup) == 1 << bits
    for mask in range(1 << bits):
        assert sub[mask] == sum(1 for v in values if v & ~mask == 0)
        assert sup[mask] == sum(1 for v in values if v & mask == mask)
    assert sub[(1 << bits) - 1] == len(values)
    assert sup[0] == len(values)


def test_sos_counts_rejects_wide_values():
    with pytest.raises(ValueError):
        sos_counts([4], 2)
    with pytest.raises(ValueError):
        sos_counts([-1], 2)