"""Namespaces: a version byte followed by a 28-byte ID."""

from __future__ import annotations

import base64
import binascii
import functools
import json

from datasquare.consts import (
    NAMESPACE_ID_SIZE,
    NAMESPACE_SIZE,
    NAMESPACE_VERSION_MAX,
    NAMESPACE_VERSION_SIZE,
    NAMESPACE_VERSION_ZERO,
    NAMESPACE_VERSION_ZERO_ID_SIZE,
    NAMESPACE_VERSION_ZERO_PREFIX,
    SUPPORTED_BLOB_NAMESPACE_VERSIONS,
    VERSION_INDEX,
)


class NamespaceError(ValueError):
    """Raised when a namespace is malformed or not allowed for its use."""


def _format_byte_list(data: bytes) -> str:
    return "[" + " ".join(str(b) for b in data) + "]"


@functools.total_ordering
class Namespace:
    """An immutable namespace, ordered by its raw bytes."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytes(data)

    @property
    def version(self) -> int:
        """The namespace version (first byte)."""
        return self._data[VERSION_INDEX]

    @property
    def id(self) -> bytes:
        """The namespace ID (every byte after the version)."""
        return self._data[NAMESPACE_VERSION_SIZE:]

    def to_bytes(self) -> bytes:
        return self._data

    def __bytes__(self) -> bytes:
        return self._data

    def __str__(self) -> str:
        return self._data.hex()

    def __repr__(self) -> str:
        return f"Namespace({self._data.hex()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Namespace):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Namespace):
            return NotImplemented
        return self._data < other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def compare(self, other: Namespace) -> int:
        """Return -1, 0 or 1 comparing the raw bytes of both namespaces."""
        return (self._data > other._data) - (self._data < other._data)

    def to_json(self) -> str:
        """Encode the namespace bytes as a JSON base64 string."""
        return json.dumps(base64.b64encode(self._data).decode("ascii"))

    @classmethod
    def from_json(cls, text: str | bytes) -> Namespace:
        """Decode a JSON base64 string into a validated namespace."""
        value = json.loads(text)
        if value is None:
            raw = b""
        elif isinstance(value, str):
            try:
                raw = base64.b64decode(value, validate=True)
            except (binascii.Error, ValueError) as exc:
                raise NamespaceError(f"invalid base64 namespace: {exc}") from exc
        else:
            raise NamespaceError("namespace JSON must be a base64 string")
        return new_namespace_from_bytes(raw)

    def _validate_version_supported(self) -> None:
        if self.version not in (NAMESPACE_VERSION_ZERO, NAMESPACE_VERSION_MAX):
            raise NamespaceError(f"unsupported namespace version {self.version}")

    def _validate_id(self) -> None:
        ns_id = self.id
        if len(ns_id) != NAMESPACE_ID_SIZE:
            raise NamespaceError(
                f"unsupported namespace id length: id {_format_byte_list(ns_id)} "
                f"must be {NAMESPACE_ID_SIZE} bytes but it was {len(ns_id)} bytes"
            )
        if self.version == NAMESPACE_VERSION_ZERO and not ns_id.startswith(
            NAMESPACE_VERSION_ZERO_PREFIX
        ):
            raise NamespaceError(
                f"unsupported namespace id with version {self.version}. "
                f"ID {_format_byte_list(ns_id)} must start with "
                f"{len(NAMESPACE_VERSION_ZERO_PREFIX)} leading zeros"
            )

    def _validate(self) -> None:
        self._validate_version_supported()
        self._validate_id()

    def validate_for_data(self) -> None:
        """Raise NamespaceError unless the namespace may hold real data."""
        self._validate()
        if not self.is_usable_namespace():
            raise NamespaceError(
                f"invalid data namespace({self}): parity and tail padding namespace are forbidden"
            )

    def validate_for_blob(self) -> None:
        """Raise NamespaceError unless the namespace may hold blob data."""
        self.validate_for_data()
        if self.is_reserved():
            raise NamespaceError(f"invalid data namespace({self}): reserved data is forbidden")
        if self.version not in SUPPORTED_BLOB_NAMESPACE_VERSIONS:
            raise NamespaceError(f"blob version {self.version} is not supported")

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def is_reserved(self) -> bool:
        return self.is_primary_reserved() or self.is_secondary_reserved()

    def is_primary_reserved(self) -> bool:
        return self <= MAX_PRIMARY_RESERVED_NAMESPACE

    def is_secondary_reserved(self) -> bool:
        return self >= MIN_SECONDARY_RESERVED_NAMESPACE

    def is_usable_namespace(self) -> bool:
        """True unless this is the parity or tail padding namespace."""
        return not self.is_parity_shares() and not self.is_tail_padding()

    def is_parity_shares(self) -> bool:
        return self == PARITY_SHARES_NAMESPACE

    def is_tail_padding(self) -> bool:
        return self == TAIL_PADDING_NAMESPACE

    def is_primary_reserved_padding(self) -> bool:
        return self == PRIMARY_RESERVED_PADDING_NAMESPACE

    def is_tx(self) -> bool:
        return self == TX_NAMESPACE

    def is_pay_for_blob(self) -> bool:
        return self == PAY_FOR_BLOB_NAMESPACE

    def repeat(self, times: int) -> list[Namespace]:
        """Return a list holding ``times`` copies of this namespace."""
        return [Namespace(self._data) for _ in range(times)]

    def add_int(self, value: int) -> Namespace:
        """Add ``value`` to the namespace read as a big-endian integer."""
        if value == 0:
            return self
        if len(self._data) != NAMESPACE_SIZE:
            raise NamespaceError(
                f"invalid namespace length: {len(self._data)}. Must be {NAMESPACE_SIZE} bytes"
            )
        total = int.from_bytes(self._data, "big") + value
        if total < 0 or total >= 1 << (8 * NAMESPACE_SIZE):
            raise NamespaceError("namespace overflow")
        return Namespace(total.to_bytes(NAMESPACE_SIZE, "big"))


def _raw_namespace(version: int, namespace_id: bytes) -> Namespace:
    return Namespace(bytes([version]) + bytes(namespace_id))


def new_namespace(version: int, namespace_id: bytes) -> Namespace:
    """Build a namespace from a version and ID, raising NamespaceError if invalid."""
    if not 0 <= version <= 0xFF:
        raise NamespaceError(f"unsupported namespace version {version}")
    ns = _raw_namespace(version, namespace_id)
    ns._validate()
    return ns


def new_namespace_from_bytes(data: bytes) -> Namespace:
    """Build a validated namespace from its full byte form."""
    if len(data) != NAMESPACE_SIZE:
        raise NamespaceError(
            f"invalid namespace length: {len(data)}. Must be {NAMESPACE_SIZE} bytes"
        )
    ns = Namespace(data)
    ns._validate()
    return ns


def new_v0_namespace(sub_id: bytes) -> Namespace:
    """Build a version 0 namespace, left-padding ``sub_id`` with zeros to 10 bytes."""
    if len(sub_id) > NAMESPACE_VERSION_ZERO_ID_SIZE:
        raise NamespaceError(
            f"subID must be <= {NAMESPACE_VERSION_ZERO_ID_SIZE}, but it was {len(sub_id)} bytes"
        )
    return new_namespace_from_bytes(left_pad(bytes(sub_id), NAMESPACE_SIZE))


def left_pad(data: bytes, size: int) -> bytes:
    """Left-pad ``data`` with zero bytes to ``size``; longer input is returned as is."""
    if len(data) >= size:
        return data
    return bytes(size - len(data)) + data


def _primary_reserved_namespace(last_byte: int) -> Namespace:
    return _raw_namespace(NAMESPACE_VERSION_ZERO, bytes(NAMESPACE_ID_SIZE - 1) + bytes([last_byte]))


def _secondary_reserved_namespace(last_byte: int) -> Namespace:
    return _raw_namespace(
        NAMESPACE_VERSION_MAX, b"\xff" * (NAMESPACE_ID_SIZE - 1) + bytes([last_byte])
    )


TX_NAMESPACE = _primary_reserved_namespace(0x01)
INTERMEDIATE_STATE_ROOTS_NAMESPACE = _primary_reserved_namespace(0x02)
PAY_FOR_BLOB_NAMESPACE = _primary_reserved_namespace(0x04)
PRIMARY_RESERVED_PADDING_NAMESPACE = _primary_reserved_namespace(0xFF)
MAX_PRIMARY_RESERVED_NAMESPACE = _primary_reserved_namespace(0xFF)
MIN_SECONDARY_RESERVED_NAMESPACE = _secondary_reserved_namespace(0x00)
TAIL_PADDING_NAMESPACE = _secondary_reserved_namespace(0xFE)
PARITY_SHARES_NAMESPACE = _secondary_reserved_namespace(0xFF)