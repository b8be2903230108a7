"""Size, version and layout constants for shares and namespaces."""

# Size of a share in bytes.
SHARE_SIZE = 512

# Bytes reserved for the info byte (share version and sequence start flag).
SHARE_INFO_BYTES = 1

# Bytes reserved for the sequence length in the first share of a sequence.
SEQUENCE_LEN_BYTES = 4

# The first share version format.
SHARE_VERSION_ZERO = 0

# The second share version format; requires a signer in the first share.
SHARE_VERSION_ONE = 1

# The share version to use when unsure.
DEFAULT_SHARE_VERSION = SHARE_VERSION_ZERO

# Bytes reserved for the location of the first unit in a compact share.
SHARE_RESERVED_BYTES = 4

# Older name for SHARE_RESERVED_BYTES.
COMPACT_SHARE_RESERVED_BYTES = SHARE_RESERVED_BYTES

# Size of a namespace version in bytes.
NAMESPACE_VERSION_SIZE = 1

# Index of the version byte within a namespace.
VERSION_INDEX = 0

# Size of a namespace ID in bytes.
NAMESPACE_ID_SIZE = 28

# Size of a namespace (version + ID) in bytes.
NAMESPACE_SIZE = NAMESPACE_VERSION_SIZE + NAMESPACE_ID_SIZE

# The first namespace version.
NAMESPACE_VERSION_ZERO = 0

# The highest namespace version.
NAMESPACE_VERSION_MAX = 0xFF

# Number of zero bytes prefixed to version 0 namespace IDs.
NAMESPACE_VERSION_ZERO_PREFIX_SIZE = 18

# Bytes available for the user-chosen part of a version 0 namespace ID.
NAMESPACE_VERSION_ZERO_ID_SIZE = NAMESPACE_ID_SIZE - NAMESPACE_VERSION_ZERO_PREFIX_SIZE

# The prefix of every version 0 namespace ID.
NAMESPACE_VERSION_ZERO_PREFIX = bytes(NAMESPACE_VERSION_ZERO_PREFIX_SIZE)

# Bytes usable for data in the first compact share of a sequence.
FIRST_COMPACT_SHARE_CONTENT_SIZE = (
    SHARE_SIZE - NAMESPACE_SIZE - SHARE_INFO_BYTES - SEQUENCE_LEN_BYTES - SHARE_RESERVED_BYTES
)

# Bytes usable for data in a continuation compact share.
CONTINUATION_COMPACT_SHARE_CONTENT_SIZE = (
    SHARE_SIZE - NAMESPACE_SIZE - SHARE_INFO_BYTES - SHARE_RESERVED_BYTES
)

# Bytes usable for data in the first sparse share of a sequence.
FIRST_SPARSE_SHARE_CONTENT_SIZE = SHARE_SIZE - NAMESPACE_SIZE - SHARE_INFO_BYTES - SEQUENCE_LEN_BYTES

# Bytes usable for data in a continuation sparse share.
CONTINUATION_SPARSE_SHARE_CONTENT_SIZE = SHARE_SIZE - NAMESPACE_SIZE - SHARE_INFO_BYTES

# The smallest width of an unextended data square.
MIN_SQUARE_SIZE = 1

# The fewest shares an unextended data square may hold.
MIN_SHARE_COUNT = MIN_SQUARE_SIZE * MIN_SQUARE_SIZE

# The highest value a share version can take.
MAX_SHARE_VERSION = 127

# Size of a signer in bytes.
SIGNER_SIZE = 20

# Share versions this package supports.
SUPPORTED_SHARE_VERSIONS = (SHARE_VERSION_ZERO, SHARE_VERSION_ONE)

# Namespace versions a user may choose for blobs.
SUPPORTED_BLOB_NAMESPACE_VERSIONS = (NAMESPACE_VERSION_ZERO,)