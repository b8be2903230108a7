"""Blobs: data submitted under a namespace with an optional signer."""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Iterable

from datasquare.consts import (
    MAX_SHARE_VERSION,
    NAMESPACE_VERSION_MAX,
    NAMESPACE_VERSION_ZERO,
    SHARE_VERSION_ONE,
    SHARE_VERSION_ZERO,
    SIGNER_SIZE,
)
from datasquare.namespace import Namespace, NamespaceError, new_namespace

_UINT32_MAX = 0xFFFFFFFF
_UINT64_MASK = (1 << 64) - 1

_WIRE_VARINT = 0
_WIRE_FIXED64 = 1
_WIRE_BYTES = 2
_WIRE_FIXED32 = 5

_FIELD_NAMESPACE_ID = 1
_FIELD_DATA = 2
_FIELD_SHARE_VERSION = 3
_FIELD_NAMESPACE_VERSION = 4
_FIELD_SIGNER = 5


class BlobError(ValueError):
    """Raised when a blob is invalid or cannot be decoded."""


def _encode_varint(value: int) -> bytes:
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def _decode_varint(data: bytes, pos: int) -> tuple[int, int]:
    result = 0
    shift = 0
    while True:
        if pos >= len(data):
            raise BlobError("truncated varint")
        if shift >= 70:
            raise BlobError("varint overflow")
        byte = data[pos]
        pos += 1
        result |= (byte & 0x7F) << shift
        if byte < 0x80:
            return result & _UINT64_MASK, pos
        shift += 7


def _key(field: int, wire_type: int) -> bytes:
    return _encode_varint((field << 3) | wire_type)


@dataclass
class BlobProto:
    """The wire form of a blob."""

    namespace_id: bytes = b""
    data: bytes = b""
    share_version: int = 0
    namespace_version: int = 0
    signer: bytes = b""

    def to_bytes(self) -> bytes:
        """Encode as a protobuf message, omitting default values."""
        out = bytearray()
        for field, value in (
            (_FIELD_NAMESPACE_ID, self.namespace_id),
            (_FIELD_DATA, self.data),
        ):
            if value:
                out += _key(field, _WIRE_BYTES) + _encode_varint(len(value)) + value
        for field, number in (
            (_FIELD_SHARE_VERSION, self.share_version),
            (_FIELD_NAMESPACE_VERSION, self.namespace_version),
        ):
            if number:
                out += _key(field, _WIRE_VARINT) + _encode_varint(number & _UINT32_MAX)
        if self.signer:
            out += (
                _key(_FIELD_SIGNER, _WIRE_BYTES)
                + _encode_varint(len(self.signer))
                + self.signer
            )
        return bytes(out)

    @classmethod
    def from_bytes(cls, data: bytes) -> BlobProto:
        """Decode a protobuf message, skipping unknown fields."""
        data = bytes(data)
        pb = cls()
        pos = 0
        while pos < len(data):
            key, pos = _decode_varint(data, pos)
            field, wire_type = key >> 3, key & 0x7
            if field == 0:
                raise BlobError("invalid field number 0")
            if wire_type == _WIRE_VARINT:
                value, pos = _decode_varint(data, pos)
                if field == _FIELD_SHARE_VERSION:
                    pb.share_version = value & _UINT32_MAX
                elif field == _FIELD_NAMESPACE_VERSION:
                    pb.namespace_version = value & _UINT32_MAX
            elif wire_type == _WIRE_BYTES:
                length, pos = _decode_varint(data, pos)
                end = pos + length
                if end > len(data):
                    raise BlobError("truncated length-delimited field")
                chunk = data[pos:end]
                pos = end
                if field == _FIELD_NAMESPACE_ID:
                    pb.namespace_id = chunk
                elif field == _FIELD_DATA:
                    pb.data = chunk
                elif field == _FIELD_SIGNER:
                    pb.signer = chunk
            elif wire_type == _WIRE_FIXED64:
                pos += 8
                if pos > len(data):
                    raise BlobError("truncated fixed64 field")
            elif wire_type == _WIRE_FIXED32:
                pos += 4
                if pos > len(data):
                    raise BlobError("truncated fixed32 field")
            else:
                raise BlobError(f"unsupported wire type {wire_type}")
        return pb


class Blob:
    """A binary large object bound to a namespace, with an optional signer."""

    __slots__ = ("_namespace", "_data", "_share_version", "_signer")

    def __init__(
        self,
        namespace: Namespace,
        data: bytes,
        share_version: int,
        signer: bytes | None = None,
    ) -> None:
        if not data:
            raise BlobError("data can not be empty")
        if namespace.is_empty():
            raise BlobError("namespace can not be empty")
        if namespace.version != NAMESPACE_VERSION_ZERO:
            raise BlobError(
                f"namespace version must be {NAMESPACE_VERSION_ZERO} "
                f"got {namespace.version}"
            )
        if share_version == SHARE_VERSION_ZERO:
            if signer is not None:
                raise BlobError("share version 0 does not support signer")
        elif share_version == SHARE_VERSION_ONE:
            if signer is None or len(signer) != SIGNER_SIZE:
                raise BlobError(
                    f"share version 1 requires signer of size {SIGNER_SIZE} bytes"
                )
        else:
            raise BlobError(
                f"share version {share_version} not supported. Please use 0 or 1"
            )
        self._namespace = namespace
        self._data = bytes(data)
        self._share_version = share_version
        self._signer = None if signer is None else bytes(signer)

    @property
    def namespace(self) -> Namespace:
        return self._namespace

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def share_version(self) -> int:
        return self._share_version

    @property
    def signer(self) -> bytes | None:
        return self._signer

    @classmethod
    def from_proto(cls, pb: BlobProto) -> Blob:
        """Build a validated blob from its wire form."""
        if pb.namespace_version > NAMESPACE_VERSION_MAX:
            raise BlobError(
                "namespace version can not be greater than MaxNamespaceVersion"
            )
        if pb.share_version > MAX_SHARE_VERSION:
            raise BlobError(
                "share version can not be greater than MaxShareVersion "
                f"{MAX_SHARE_VERSION}"
            )
        try:
            ns = new_namespace(pb.namespace_version, pb.namespace_id)
        except NamespaceError as exc:
            raise BlobError(f"invalid namespace: {exc}") from exc
        return cls(ns, pb.data, pb.share_version, pb.signer or None)

    def to_proto(self) -> BlobProto:
        return BlobProto(
            namespace_id=self._namespace.id,
            data=self._data,
            share_version=self._share_version,
            namespace_version=self._namespace.version,
            signer=self._signer or b"",
        )

    def marshal(self) -> bytes:
        """Encode the blob as protobuf bytes."""
        return self.to_proto().to_bytes()

    @classmethod
    def unmarshal(cls, data: bytes) -> Blob:
        """Decode a blob from protobuf bytes."""
        try:
            pb = BlobProto.from_bytes(data)
        except BlobError as exc:
            raise BlobError(f"failed to unmarshal blob: {exc}") from exc
        return cls.from_proto(pb)

    def to_json(self) -> str:
        """Encode the blob as JSON, omitting empty fields."""
        pb = self.to_proto()
        obj: dict[str, object] = {}
        if pb.namespace_id:
            obj["namespace_id"] = base64.b64encode(pb.namespace_id).decode("ascii")
        if pb.data:
            obj["data"] = base64.b64encode(pb.data).decode("ascii")
        if pb.share_version:
            obj["share_version"] = pb.share_version
        if pb.namespace_version:
            obj["namespace_version"] = pb.namespace_version
        if pb.signer:
            obj["signer"] = base64.b64encode(pb.signer).decode("ascii")
        return json.dumps(obj)

    @classmethod
    def from_json(cls, text: str | bytes) -> Blob:
        """Decode a blob from its JSON form."""
        try:
            obj = json.loads(text)
        except json.JSONDecodeError as exc:
            raise BlobError(f"invalid blob JSON: {exc}") from exc
        if not isinstance(obj, dict):
            raise BlobError("blob JSON must be an object")
        fields = {str(key).lower(): value for key, value in obj.items()}
        return cls.from_proto(
            BlobProto(
                namespace_id=_json_bytes(fields.get("namespace_id")),
                data=_json_bytes(fields.get("data")),
                share_version=_json_uint32(fields.get("share_version")),
                namespace_version=_json_uint32(fields.get("namespace_version")),
                signer=_json_bytes(fields.get("signer")),
            )
        )

    def data_len(self) -> int:
        return len(self._data)

    def compare(self, other: Blob) -> int:
        """Order two blobs by namespace: -1, 0 or 1."""
        return self._namespace.compare(other._namespace)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def _key(self) -> tuple:
        return (self._namespace, self._data, self._share_version, self._signer)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Blob):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Blob(namespace={self._namespace}, data_len={len(self._data)}, "
            f"share_version={self._share_version})"
        )


def _json_bytes(value: object) -> bytes:
    if value is None:
        return b""
    if not isinstance(value, str):
        raise BlobError("expected a base64 string")
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise BlobError(f"invalid base64: {exc}") from exc


def _json_uint32(value: object) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise BlobError("expected an unsigned integer")
    if not 0 <= value <= _UINT32_MAX:
        raise BlobError(f"value {value} out of range for uint32")
    return value


def new_v0_blob(namespace: Namespace, data: bytes) -> Blob:
    """Build a share version 0 blob."""
    return Blob(namespace, data, SHARE_VERSION_ZERO, None)


def new_v1_blob(namespace: Namespace, data: bytes, signer: bytes) -> Blob:
    """Build a share version 1 blob carrying a signer."""
    return Blob(namespace, data, SHARE_VERSION_ONE, signer)


def sort_blobs(blobs: Iterable[Blob] | list[Blob]) -> None:
    """Sort a list of blobs in place by namespace, keeping equal ones in order."""
    blobs.sort(key=lambda blob: blob.namespace)