"""Square size checks and worst-case share index estimates."""

from __future__ import annotations

# Upper bound on the square width kept for compatibility with older layouts,
# where the worst-case share index was always computed as this value squared.
SQUARE_SIZE_UPPER_BOUND = 128

WORST_CASE_SHARE_INDEX = SQUARE_SIZE_UPPER_BOUND * SQUARE_SIZE_UPPER_BOUND


def is_power_of_two(value: int) -> bool:
    """Return True if ``value`` is a positive power of two."""
    return value > 0 and value & (value - 1) == 0


def worst_case_share_indexes(blobs: int) -> list[int]:
    """Return the largest possible share index for each of ``blobs`` blobs.

    Larger indexes take more bytes as varints, so these give an upper bound
    on the encoded size of the share indexes recorded for a set of blobs.
    """
    if blobs < 0:
        raise ValueError(f"number of blobs {blobs} must not be negative")
    return [WORST_CASE_SHARE_INDEX] * blobs