import pytest

from datasquare.commitment_rules import (
    blob_min_square_size,
    blob_shares_used_non_interactive_defaults,
    merkle_mountain_range_sizes,
    next_share_index,
    round_down_power_of_two,
    round_up_by_multiple_of,
    round_up_power_of_two,
    sub_tree_width,
)

THRESHOLD = 64
MAX_SQUARE_SIZE = 128


@pytest.mark.parametrize(
    "cursor, expected, blob_lens, indexes",
    [
        (2, 1, [1], [2]),
        (3, 6, [3, 3], [3, 6]),
        (0, 8, [8], [0]),
        (1, 6, [3, 3], [1, 4]),
        (1, 32, [1] * 32, list(range(1, 33))),
        (3, 12, [5, 7], [3, 8]),
        (0, 20, [5, 5, 5, 5], [0, 5, 10, 15]),
        (0, 10, [10], [0]),
        (0, 0, [0], [0]),
        (1, 20, [10, 10], [1, 11]),
        (0, 1000, [1000], [0]),
        (0, 129, [129], [0]),
        (1, 385, [128, 128, 128], [2, 130, 258]),
        (1024, 32, [32], [1024]),
    ],
)
def test_blob_shares_used_non_interactive_defaults(cursor, expected, blob_lens, indexes):
    used, got_indexes = blob_shares_used_non_interactive_defaults(
        cursor, THRESHOLD, *blob_lens
    )
    assert used == expected
    assert got_indexes == indexes


@pytest.mark.parametrize(
    "cursor, blob_len, expected",
    [
        (0, 4, 0),
        (1, 2, 1),
        (2, 2, 2),
        (3, 4, 3),
        (3, 5, 3),
        (3, 2, 3),
        (1, 12, 1),
        (10291, 1, 10291),
        (11, 2, 11),
        (11, 11, 11),
        (11, THRESHOLD, 11),
        (64, THRESHOLD + 1, 64),
        (64, THRESHOLD - 1, 64),
        (1, THRESHOLD - 1, 1),
        (1, 16256, 128),
        (1, 8192, 128),
        (1, 4096, 64),
        (1, 8193, 128),
    ],
)
def test_next_share_index(cursor, blob_len, expected):
    assert next_share_index(cursor, blob_len, THRESHOLD) == expected


@pytest.mark.parametrize(
    "cursor, v, expected",
    [
        (1, 2, 2),
        (2, 2, 2),
        (0, 2, 0),
        (5, 2, 6),
        (8, 16, 16),
        (33, 1, 33),
        (32, 16, 32),
        (33, 16, 48),
    ],
)
def test_round_up_by_multiple_of(cursor, v, expected):
    assert round_up_by_multiple_of(cursor, v) == expected


def test_round_up_by_multiple_of_zero():
    with pytest.raises(ValueError, match="v cannot be 0"):
        round_up_by_multiple_of(10, 0)


@pytest.mark.parametrize(
    "value, expected",
    [(-1, 1), (0, 1), (1, 1), (2, 2), (4, 4), (5, 8), (8, 8), (11, 16), (511, 512)],
)
def test_round_up_power_of_two(value, expected):
    assert round_up_power_of_two(value) == expected


@pytest.mark.parametrize(
    "share_count, expected",
    [(0, 1), (1, 1), (2, 2), (3, 2), (4, 2), (5, 4), (16, 4), (17, 8)],
)
def test_blob_min_square_size(share_count, expected):
    assert blob_min_square_size(share_count) == expected


@pytest.mark.parametrize(
    "share_count, expected",
    [
        (0, 1),
        (1, 1),
        (2, 1),
        (THRESHOLD, 1),
        (THRESHOLD + 1, 2),
        (THRESHOLD - 1, 1),
        (THRESHOLD * 2, 2),
        (THRESHOLD * 2 + 1, 4),
        (THRESHOLD * 3 - 1, 4),
        (THRESHOLD * 4, 4),
        (THRESHOLD * 5, 8),
        (THRESHOLD * MAX_SQUARE_SIZE - 1, 128),
    ],
)
def test_sub_tree_width(share_count, expected):
    assert sub_tree_width(share_count, THRESHOLD) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(1, 1), (2, 2), (4, 4), (5, 4), (8, 8), (11, 8), (511, 256)],
)
def test_round_down_power_of_two(value, expected):
    assert round_down_power_of_two(value) == expected


@pytest.mark.parametrize("value", [0, -3])
def test_round_down_power_of_two_rejects_non_positive(value):
    with pytest.raises(ValueError, match="must be positive"):
        round_down_power_of_two(value)


@pytest.mark.parametrize(
    "total, max_tree, expected",
    [
        (11, 4, [4, 4, 2, 1]),
        (2, 64, [2]),
        (64, 8, [8] * 8),
        (19, 8, [8, 8, 2, 1]),
    ],
)
def test_merkle_mountain_range_sizes(total, max_tree, expected):
    assert merkle_mountain_range_sizes(total, max_tree) == expected


def test_merkle_mountain_range_sizes_sum_to_total():
    for total in range(0, 200):
        sizes = merkle_mountain_range_sizes(total, 16)
        assert sum(sizes) == total
        assert all(size <= 16 for size in sizes)


def test_merkle_mountain_range_sizes_empty():
    assert merkle_mountain_range_sizes(0, 8) == []


def test_merkle_mountain_range_sizes_rejects_zero_max():
    with pytest.raises(ValueError):
        merkle_mountain_range_sizes(5, 0)


def test_blobs_never_overlap():
    lens = [3, 70, 1, 200, 5, 129]
    used, indexes = blob_shares_used_non_interactive_defaults(7, THRESHOLD, *lens)
    ends = [start + length for start, length in zip(indexes, lens)]
    assert indexes[0] >= 7
    assert all(nxt >= end for end, nxt in zip(ends, indexes[1:]))
    assert used == ends[-1] - 7