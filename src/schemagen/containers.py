"""Mutable set that remembers insertion order."""

from collections.abc import MutableSet
from typing import Any, Dict, Iterable, Iterator, List, Optional


class OrderedSet(MutableSet):
    """
    A set whose iteration order is the order elements were first added.

    Used for default values of unique-items arrays: duplicates are
    rejected, but the declared order of the default survives.

    Unhashable members (a unique array of arrays) are deduplicated by
    equality instead of by hash.
    """

    def __init__(self, items: Optional[Iterable[Any]] = None):
        self._hashed: Dict[Any, None] = {}
        self._unhashed: List[Any] = []
        self._order: List[Any] = []
        if items is not None:
            for item in items:
                self.add(item)

    def __contains__(self, item: Any) -> bool:
        try:
            return item in self._hashed
        except TypeError:
            return any(item == other for other in self._unhashed)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def add(self, item: Any) -> None:
        if item in self:
            return
        try:
            self._hashed[item] = None
        except TypeError:
            self._unhashed.append(item)
        self._order.append(item)

    def discard(self, item: Any) -> None:
        if item not in self:
            return
        try:
            del self._hashed[item]
        except TypeError:
            self._unhashed.remove(item)
        self._order.remove(item)

    def __repr__(self) -> str:
        return f"OrderedSet({self._order!r})"
