# datasquare

Building blocks for laying out transactions and blobs in a data square:
namespaces, blobs, info bytes, compact share counting, the blob share
commitment rules that decide where each blob may start, and square size
helpers.

## Installation

```
pip install datasquare
```

For running the tests:

```
pip install "datasquare[test]"
pytest
```

## Modules

- `datasquare.consts`: share, namespace and signer sizes and versions,
  such as `SHARE_SIZE`, `NAMESPACE_SIZE` and `FIRST_COMPACT_SHARE_CONTENT_SIZE`.
- `datasquare.namespace`: `Namespace`, `NamespaceError`, the constructors
  `new_namespace`, `new_namespace_from_bytes`, `new_v0_namespace`, and the
  reserved namespaces (`TX_NAMESPACE`, `PAY_FOR_BLOB_NAMESPACE`,
  `TAIL_PADDING_NAMESPACE`, `PARITY_SHARES_NAMESPACE`, ...).
- `datasquare.info_byte`: `InfoByte`, `new_info_byte`, `parse_info_byte`.
- `datasquare.counter`: `CompactShareCounter`.
- `datasquare.blob`: `Blob`, `BlobProto`, `BlobError`, `new_v0_blob`,
  `new_v1_blob`, `sort_blobs`.
- `datasquare.commitment_rules`: `next_share_index`, `sub_tree_width`,
  `blob_min_square_size`, `merkle_mountain_range_sizes` and related helpers.
- `datasquare.square_size`: `is_power_of_two`, `worst_case_share_indexes`.

## Namespaces

```python
from datasquare.namespace import new_v0_namespace

ns = new_v0_namespace(bytes([1] * 10))   # sub-ID left-padded with zeros
print(ns.version, ns.id.hex(), str(ns))
print(ns.is_reserved())                  # False
ns.validate_for_blob()                   # raises NamespaceError if unusable for blobs
later = ns.add_int(1)                    # next namespace, read as a big-endian number
assert ns < later
```

Namespaces compare, sort and hash by their raw bytes. `to_json` and
`Namespace.from_json` encode them as a base64 JSON string.

## Info bytes

```python
from datasquare.info_byte import new_info_byte, parse_info_byte

info = new_info_byte(1, True)
print(int(info), info.version, info.is_sequence_start)   # 3 1 True
parse_info_byte(0b11111111).version                      # 127
```

A version above 127 raises `ValueError`.

## Blobs

```python
from datasquare.blob import Blob, new_v0_blob, new_v1_blob

blob = new_v0_blob(ns, b"hello")
assert Blob.unmarshal(blob.marshal()) == blob       # protobuf wire form
assert Blob.from_json(blob.to_json()) == blob

signed = new_v1_blob(ns, b"hello", bytes(20))       # share version 1 needs a 20-byte signer
```

Invalid input, such as empty data, a namespace whose version is not 0, a
signer with share version 0 or an unsupported share version, raises
`BlobError`. `sort_blobs` sorts a list of blobs in place by namespace,
keeping blobs of the same namespace in their order.

## Counting compact shares

```python
from datasquare.counter import CompactShareCounter

counter = CompactShareCounter()
added = counter.add(300)   # shares added by this unit, including its length prefix
print(counter.size)        # shares counted so far
print(counter.remainder)   # bytes used in the last, partly filled share
counter.revert()           # undo the last add
```

## Share commitment rules

```python
from datasquare.commitment_rules import (
    blob_min_square_size,
    blob_shares_used_non_interactive_defaults,
    merkle_mountain_range_sizes,
    next_share_index,
    sub_tree_width,
)

next_share_index(1, 4096, 64)          # 64
sub_tree_width(65, 64)                 # 2
blob_min_square_size(17)               # 8
merkle_mountain_range_sizes(11, 4)     # [4, 4, 2, 1]
blob_shares_used_non_interactive_defaults(1, 64, 3, 3)   # (6, [1, 4])
```

`round_up_by_multiple_of`, `round_up_power_of_two` and
`round_down_power_of_two` are available too; invalid arguments raise
`ValueError`.

## Square sizes

```python
from datasquare.square_size import is_power_of_two, worst_case_share_indexes

is_power_of_two(64)            # True
worst_case_share_indexes(2)    # [16384, 16384]
```

## What this package does not do

It does not split transactions or blobs into shares, parse shares back into
transactions, blobs or sequences, build padding shares, compute share
commitments (subtree roots), or build and export a full data square. It
provides the sizing, ordering and placement rules those steps rely on.