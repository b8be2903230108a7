"""Counting how many compact shares a series of units will occupy."""

from __future__ import annotations

from datasquare.consts import (
    CONTINUATION_COMPACT_SHARE_CONTENT_SIZE,
    FIRST_COMPACT_SHARE_CONTENT_SIZE,
)


def _delim_len(value: int) -> int:
    """Number of bytes taken by the unsigned varint encoding of ``value``."""
    length = 1
    while value >= 0x80:
        value >>= 7
        length += 1
    return length


class CompactShareCounter:
    """Tracks the number of compact shares a set of units will be split into."""

    def __init__(self) -> None:
        self._shares = 0
        # number of bytes used for data in the last, partly filled share
        self._remainder = 0
        self._last_shares = 0
        self._last_remainder = 0

    def add(self, data_len: int) -> int:
        """Count a unit of ``data_len`` bytes; return how many shares were added."""
        if data_len < 0:
            raise ValueError(f"data length {data_len} must not be negative")
        data_len += _delim_len(data_len)

        self._last_remainder = self._remainder
        self._last_shares = self._shares

        if self._shares == 0:
            free = FIRST_COMPACT_SHARE_CONTENT_SIZE - self._remainder
            if data_len >= free:
                data_len -= free
                self._shares += 1
                self._remainder = 0
            else:
                self._remainder += data_len
                data_len = 0

        free = CONTINUATION_COMPACT_SHARE_CONTENT_SIZE - self._remainder
        if data_len >= free:
            data_len -= free
            self._shares += 1
            self._remainder = 0
        else:
            self._remainder += data_len
            data_len = 0

        if data_len > 0:
            full, rest = divmod(data_len, CONTINUATION_COMPACT_SHARE_CONTENT_SIZE)
            self._shares += full
            self._remainder = rest

        diff = self._shares - self._last_shares
        if self._last_remainder == 0 and self._remainder > 0:
            diff += 1
        elif self._last_remainder > 0 and self._remainder == 0:
            diff -= 1
        return diff

    def revert(self) -> None:
        """Undo the last ``add``. Only the first call after an add has effect."""
        self._shares = self._last_shares
        self._remainder = self._last_remainder

    @property
    def size(self) -> int:
        """Number of shares counted so far."""
        return self._shares if self._remainder == 0 else self._shares + 1

    @property
    def remainder(self) -> int:
        """Number of data bytes used in the last, partly filled share."""
        return self._remainder