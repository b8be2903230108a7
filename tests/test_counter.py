import pytest

from datasquare.consts import (
    CONTINUATION_COMPACT_SHARE_CONTENT_SIZE,
    FIRST_COMPACT_SHARE_CONTENT_SIZE,
)
from datasquare.counter import CompactShareCounter


def test_new_counter_is_empty():
    counter = CompactShareCounter()
    assert counter.size == 0
    assert counter.remainder == 0


def test_compact_share_counter_revert():
    counter = CompactShareCounter()
    assert counter.size == 0
    counter.add(FIRST_COMPACT_SHARE_CONTENT_SIZE - 2)
    counter.add(1)
    assert counter.size == 2
    counter.revert()
    assert counter.size == 1


def test_revert_twice_has_no_further_effect():
    counter = CompactShareCounter()
    counter.add(FIRST_COMPACT_SHARE_CONTENT_SIZE - 2)
    counter.add(1)
    counter.revert()
    counter.revert()
    assert counter.size == 1


@pytest.mark.parametrize(
    "length, expected",
    [
        (120, 1),
        (FIRST_COMPACT_SHARE_CONTENT_SIZE - 2, 1),
        (FIRST_COMPACT_SHARE_CONTENT_SIZE - 1, 2),
        (FIRST_COMPACT_SHARE_CONTENT_SIZE, 2),
        (FIRST_COMPACT_SHARE_CONTENT_SIZE + 1, 2),
    ],
)
def test_single_unit(length, expected):
    counter = CompactShareCounter()
    assert counter.add(length) == expected
    assert counter.size == expected


def test_small_unit_remainder():
    counter = CompactShareCounter()
    counter.add(120)
    # one byte of varint prefix plus the data
    assert counter.remainder == 121


def test_exactly_full_first_share_has_no_remainder():
    counter = CompactShareCounter()
    counter.add(FIRST_COMPACT_SHARE_CONTENT_SIZE - 2)
    assert counter.remainder == 0
    assert counter.size == 1


@pytest.mark.parametrize(
    "lengths",
    [
        [FIRST_COMPACT_SHARE_CONTENT_SIZE, CONTINUATION_COMPACT_SHARE_CONTENT_SIZE - 4],
        [100] * 1000,
        [1000] * 100,
        [77] * 8931,
    ],
)
def test_diffs_sum_to_size(lengths):
    counter = CompactShareCounter()
    total = 0
    for length in lengths:
        diff = counter.add(length)
        assert diff >= 0
        total += diff
        assert total == counter.size


def test_size_grows_with_data():
    counter = CompactShareCounter()
    counter.add(10 * CONTINUATION_COMPACT_SHARE_CONTENT_SIZE)
    assert counter.size == 11


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        CompactShareCounter().add(-1)