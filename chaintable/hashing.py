"""Polynomial string hashing and bucket reduction.

The hash walks the key's UTF-16 code units and accumulates
``c0*31^(n-1) + c1*31^(n-2) + ... + c(n-1)`` in 32-bit two's-complement
arithmetic, so every platform produces the same signed value for a key.
"""

from __future__ import annotations

from .config import HASH_BASE
from .errors import InvalidArgument

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def string_hash(key: str) -> int:
    """Return the signed 32-bit polynomial hash of *key*."""
    h = 0
    data = key.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * HASH_BASE + unit) & _MASK
    return h - (1 << 32) if h & _SIGN_BIT else h


def bucket_index(key: str, capacity: int) -> int:
    """Reduce the hash of *key* to a bucket index in ``[0, capacity)``.

    ``abs`` is taken on an unbounded int, so the most negative 32-bit hash
    still yields a non-negative index.
    """
    if capacity <= 0:
        raise InvalidArgument(f"capacity must be positive to index, got {capacity}")
    return abs(string_hash(key)) % capacity
