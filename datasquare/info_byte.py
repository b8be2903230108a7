"""The info byte: a 7-bit share version and a sequence start flag."""

from __future__ import annotations

from datasquare.consts import MAX_SHARE_VERSION


class InfoByte(int):
    """A byte whose upper seven bits hold the share version and whose lowest
    bit is set when the share starts a sequence."""

    def __new__(cls, value: int = 0) -> InfoByte:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"info byte {value} must be between 0 and 255")
        return super().__new__(cls, value)

    @property
    def version(self) -> int:
        """The share version encoded in this byte."""
        return int(self) >> 1

    @property
    def is_sequence_start(self) -> bool:
        """Whether this share is the first share of a sequence."""
        return int(self) % 2 == 1

    def __repr__(self) -> str:
        return (
            f"InfoByte(version={self.version}, "
            f"is_sequence_start={self.is_sequence_start})"
        )


def new_info_byte(version: int, is_sequence_start: bool) -> InfoByte:
    """Build an info byte, raising ValueError if the version is out of range."""
    if version > MAX_SHARE_VERSION:
        raise ValueError(
            f"version {version} must be less than or equal to {MAX_SHARE_VERSION}"
        )
    if version < 0:
        raise ValueError(f"version {version} must not be negative")
    prefix = version << 1
    return InfoByte(prefix + 1 if is_sequence_start else prefix)


def parse_info_byte(value: int) -> InfoByte:
    """Decode a raw byte into an info byte."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"info byte {value} must be between 0 and 255")
    return new_info_byte(value >> 1, value % 2 == 1)