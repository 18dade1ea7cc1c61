from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..config import DEFAULT_CAPACITY
from .hash_map import ChainedHashTable

_MISSING = object()


class StringDict:
    """A mapping-style wrapper around :class:`ChainedHashTable`.

    The table reports misses and rejected input through return values;
    this wrapper turns them into the usual ``KeyError`` / ``TypeError``.
    """

    __slots__ = ("_map",)

    def __init__(
        self,
        it: Optional[Union[Dict[str, str], Iterable[Tuple[str, str]]]] = None,
        *,
        capacity: int = DEFAULT_CAPACITY,
        **kwargs: str,
    ) -> None:
        self._map = ChainedHashTable(capacity)
        if it is not None:
            # Accept dict-like or iterable of pairs
            if hasattr(it, "items"):
                for k, v in it.items():  # type: ignore[union-attr]
                    self[k] = v
            else:
                for k, v in it:
                    self[k] = v
        for k, v in kwargs.items():
            self[k] = v

    def __setitem__(self, key: str, value: str) -> None:
        if not self._map.set(key, value):
            raise TypeError(
                f"cannot store {key!r}: {value!r} in a table of capacity {self._map.capacity}"
            )

    def __getitem__(self, key: str) -> str:
        val = self._map.get(key)
        if val is None:
            raise KeyError(key)
        return val

    def __delitem__(self, key: str) -> None:
        if self._map.delete(key) is None:
            raise KeyError(key)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        val = self._map.get(key)
        return default if val is None else val

    def pop(self, key: str, default=_MISSING):
        """Remove *key* and return its value; *default* or KeyError on a miss."""
        val = self._map.delete(key)
        if val is None:
            if default is _MISSING:
                raise KeyError(key)
            return default
        return val

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def keys(self) -> List[str]:
        return list(self._map.keys())

    def values(self) -> List[str]:
        return list(self._map.values())

    def items(self) -> List[Tuple[str, str]]:
        return list(self._map.items())

    def load(self) -> float:
        return self._map.load()

    def __len__(self) -> int:
        return len(self._map)

    def to_py(self) -> Dict[str, str]:
        """Convert to a native *dict*."""
        return dict(self._map.items())

    def __iter__(self) -> Iterator[str]:
        return iter(self._map.keys())

    def __repr__(self) -> str:
        return f"StringDict({self.to_py()!r})"
