from __future__ import annotations
import logging
from typing import Iterator, List, Optional, Tuple

from ..config import DEFAULT_CAPACITY
from ..errors import InvalidArgument
from ..hashing import bucket_index
from .linked_list import Chain

logger = logging.getLogger(__name__)


class ChainedHashTable:
    """A fixed-capacity separate-chaining hash table of str -> str.

    Notes:
    - Capacity is chosen once at construction; the table never resizes.
    - Buckets are created lazily, so sparse tables stay small.
    - Bad input to ``set`` and missing keys are reported through return
      values (False / None) rather than exceptions.
    - A zero-capacity table is legal: it rejects every insert and reports
      every lookup as a miss.
    """

    __slots__ = ("_cap", "_buckets", "_size")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidArgument(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity < 0:
            raise InvalidArgument(f"capacity must be non-negative, got {capacity}")
        self._cap: int = capacity
        self._buckets: list[Optional[Chain]] = [None] * self._cap
        self._size: int = 0
        logger.debug("created table with %d buckets", capacity)

    # -----------------------------
    # Properties
    # -----------------------------
    @property
    def capacity(self) -> int:
        return self._cap

    @property
    def count(self) -> int:
        return self._size

    # -----------------------------
    # Core operations
    # -----------------------------
    def hash_index(self, key: str) -> int:
        """Bucket index of *key*; raises InvalidArgument on a zero-capacity table."""
        return bucket_index(key, self._cap)

    def set(self, key: str, value: str) -> bool:
        """Insert or replace the value for *key*.

        Returns False, leaving the table untouched, when key or value is
        missing or not a str, or when the table has no buckets.
        """
        if not isinstance(key, str) or not isinstance(value, str):
            logger.debug("rejected set: key=%r value=%r must both be str", key, value)
            return False
        if self._cap == 0:
            logger.debug("rejected set of %r: table has zero capacity", key)
            return False
        idx = self.hash_index(key)
        if self._buckets[idx] is None:
            self._buckets[idx] = Chain()
        if self._buckets[idx].append_or_replace(key, value):
            self._size += 1
        return True

    def get(self, key: str) -> Optional[str]:
        """Return the value stored for *key*, or None."""
        bucket = self._bucket_for(key)
        if bucket is None:
            return None
        return bucket.find(key)

    def contains(self, key: str) -> bool:
        """Check if key exists in the table."""
        return self.get(key) is not None

    def delete(self, key: str) -> Optional[str]:
        """Remove *key* and return its value, or None if it was not present."""
        bucket = self._bucket_for(key)
        removed = bucket.delete(key) if bucket else None
        if removed is None:
            logger.debug("delete miss for %r", key)
            return None
        self._size -= 1
        return removed

    def load(self) -> float:
        """Ratio of stored entries to buckets; 0.0 for a zero-capacity table."""
        if self._cap == 0:
            return 0.0
        return self._size / self._cap

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _bucket_for(self, key: str) -> Optional[Chain]:
        if self._cap == 0 or not isinstance(key, str):
            return None
        return self._buckets[self.hash_index(key)]

    # -----------------------------
    # Iteration helpers
    # -----------------------------
    def items(self) -> Iterator[Tuple[str, str]]:
        for bucket in self._buckets:
            if bucket:
                yield from bucket.items()

    def keys(self) -> Iterator[str]:
        for k, _ in self.items():
            yield k

    def values(self) -> Iterator[str]:
        for _, v in self.items():
            yield v

    def bucket_sizes(self) -> List[int]:
        """Chain length of every bucket, in bucket order."""
        return [len(bucket) if bucket else 0 for bucket in self._buckets]

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"ChainedHashTable(capacity={self._cap}, {{{pairs}}})"
