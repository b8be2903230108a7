"""Namespaces, blobs, info bytes, compact share counting, commitment rules and square sizes."""

__version__ = "0.1.0"
__all__ = [
    "consts",
    "namespace",
    "info_byte",
    "counter",
    "blob",
    "commitment_rules",
    "square_size",
]