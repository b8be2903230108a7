"""Blob share commitment rules: where blobs may start and how wide their subtrees are."""

from __future__ import annotations

import math


def blob_shares_used_non_interactive_defaults(
    cursor: int, subtree_root_threshold: int, *args: int
) -> tuple[int, list[int]]:
    """Lay out blobs of the given share lengths starting at ``cursor``.

    The positional ``args`` are the share lengths of the blobs, in order.
    Returns the total number of shares used (padding included) and the
    starting share index of every blob.
    """
    start = cursor
    indexes: list[int] = []
    for blob_len in args:
        try:
            cursor = next_share_index(cursor, blob_len, subtree_root_threshold)
        except ValueError as exc:
            raise ValueError(f"failed to calculate next share index: {exc}") from exc
        indexes.append(cursor)
        cursor += blob_len
    return cursor - start, indexes


def next_share_index(cursor: int, blob_share_len: int, subtree_root_threshold: int) -> int:
    """Return the first index at or after ``cursor`` where a blob may start.

    ``cursor`` is the index just after the end of the previous blob.
    """
    tree_width = sub_tree_width(blob_share_len, subtree_root_threshold)
    try:
        return round_up_by_multiple_of(cursor, tree_width)
    except ValueError as exc:
        raise ValueError(
            f"failed to round up cursor {cursor} by multiple of {tree_width}: {exc}"
        ) from exc


def round_up_by_multiple_of(cursor: int, v: int) -> int:
    """Round ``cursor`` up to the next multiple of ``v``."""
    if v == 0:
        raise ValueError("v cannot be 0")
    if cursor % v == 0:
        return cursor
    return (cursor // v + 1) * v


def round_up_power_of_two(value: int) -> int:
    """Return the smallest power of two greater than or equal to ``value``."""
    result = 1
    while result < value:
        result <<= 1
    return result


def round_down_power_of_two(value: int) -> int:
    """Return the largest power of two less than or equal to ``value``."""
    if value <= 0:
        raise ValueError(f"input {value} must be positive")
    rounded_up = round_up_power_of_two(value)
    if rounded_up == value:
        return rounded_up
    return rounded_up // 2


def _ceil_sqrt(value: int) -> int:
    if value <= 0:
        return 0
    return math.isqrt(value - 1) + 1


def blob_min_square_size(share_count: int) -> int:
    """Return the smallest square width that can hold ``share_count`` shares."""
    if share_count < 0:
        raise ValueError(f"share count {share_count} must not be negative")
    return round_up_power_of_two(_ceil_sqrt(share_count))


def sub_tree_width(share_count: int, subtree_root_threshold: int) -> int:
    """Return the maximum number of leaves per subtree in a blob's share commitment."""
    if share_count < 0:
        raise ValueError(f"share count {share_count} must not be negative")
    if subtree_root_threshold <= 0:
        raise ValueError(
            f"subtree root threshold {subtree_root_threshold} must be positive"
        )
    width = -(-share_count // subtree_root_threshold)
    width = round_up_power_of_two(width)
    return min(width, blob_min_square_size(share_count))


def merkle_mountain_range_sizes(total_size: int, max_tree_size: int) -> list[int]:
    """Return the leaf counts of the trees in a merkle mountain range."""
    if total_size < 0:
        raise ValueError(f"total size {total_size} must not be negative")
    if total_size > 0 and max_tree_size <= 0:
        raise ValueError(f"max tree size {max_tree_size} must be positive")
    tree_sizes: list[int] = []
    while total_size != 0:
        if total_size >= max_tree_size:
            tree_size = max_tree_size
        else:
            tree_size = round_down_power_of_two(total_size)
        tree_sizes.append(tree_size)
        total_size -= tree_size
    return tree_sizes