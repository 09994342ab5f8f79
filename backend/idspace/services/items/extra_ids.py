"""Sorted store of ids added above the base range."""

from bisect import bisect_left
from collections.abc import Iterator


class ExtraIdStore:
    """Sorted, duplicate-free list of extra ids with O(1) membership.

    Callers validate ids before inserting; the store only keeps order.
    """

    def __init__(self) -> None:
        self._ids: list[int] = []
        self._members: set[int] = set()

    def insert(self, id_: int) -> None:
        """Insert an id at its sorted position. No-op if already present."""
        if id_ in self._members:
            return
        self._ids.insert(bisect_left(self._ids, id_), id_)
        self._members.add(id_)

    def contains(self, id_: int) -> bool:
        return id_ in self._members

    @property
    def ids(self) -> list[int]:
        """The stored ids in ascending order (live list, do not mutate)."""
        return self._ids

    def __contains__(self, id_: object) -> bool:
        return id_ in self._members

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)
