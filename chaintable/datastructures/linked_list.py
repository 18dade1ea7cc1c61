from __future__ import annotations
from typing import Iterator, Optional, Tuple


class _Node:
    """One entry of a bucket chain: a key, its value and the next entry."""

    __slots__ = ("key", "value", "next")

    def __init__(self, key: str, value: str, next: Optional["_Node"] = None) -> None:
        self.key = key
        self.value = value
        self.next = next


class Chain:
    """Singly-linked list of (key, value) entries held by one bucket.

    New keys go on the tail, so entries keep their insertion order;
    replacing a value leaves the entry where it is.
    """

    __slots__ = ("head",)

    def __init__(self) -> None:
        self.head: Optional[_Node] = None

    def append_or_replace(self, key: str, value: str) -> bool:
        """Replace the value for *key* if present; otherwise append at the tail.

        Returns True if a new node was appended; False if an existing node
        had its value replaced.
        """
        if self.head is None:
            self.head = _Node(key, value)
            return True
        n = self.head
        while True:
            if n.key == key:
                n.value = value
                return False  # replaced
            if n.next is None:
                break
            n = n.next
        n.next = _Node(key, value)
        return True

    def find(self, key: str) -> Optional[str]:
        """Return the value for *key*, or None if not present."""
        n = self.head
        while n:
            if n.key == key:
                return n.value
            n = n.next
        return None

    def delete(self, key: str) -> Optional[str]:
        """Unlink the node holding *key* and return its value, or None if absent."""
        cur = self.head
        if cur is None:
            return None
        if cur.key == key:
            self.head = cur.next
            return cur.value
        prev, cur = cur, cur.next
        while cur:
            if cur.key == key:
                prev.next = cur.next
                return cur.value
            prev, cur = cur, cur.next
        return None

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield (key, value) pairs in chain order."""
        n = self.head
        while n:
            yield (n.key, n.value)
            n = n.next

    def __len__(self) -> int:
        size = 0
        n = self.head
        while n:
            size += 1
            n = n.next
        return size

    def __bool__(self) -> bool:
        return self.head is not None
