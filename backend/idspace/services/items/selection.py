"""Ordered selection of ids."""

from collections.abc import Iterable, Iterator

from idspace.services.items.pagination import matches_search


class Selection:
    """Selected ids in placement order, with a membership set kept in lockstep.

    Order is independent of numeric id order. Validation of the ids passed in
    is the caller's job.
    """

    def __init__(self) -> None:
        self._order: list[int] = []
        self._members: set[int] = set()

    @property
    def order(self) -> list[int]:
        """Copy of the current selection order."""
        return list(self._order)

    def add(self, ids: Iterable[int]) -> list[int]:
        """Append ids that are not selected yet. Returns the newly added ids."""
        added: list[int] = []
        for id_ in ids:
            if id_ in self._members:
                continue
            self._order.append(id_)
            self._members.add(id_)
            added.append(id_)
        return added

    def remove(self, ids: Iterable[int]) -> None:
        """Drop ids, keeping the relative order of the rest."""
        to_remove = set(ids)
        self._order = [id_ for id_ in self._order if id_ not in to_remove]
        self._members -= to_remove

    def filtered_positions(self, search: str) -> list[int]:
        """Indexes into the order of every id matching ``search``."""
        return [index for index, id_ in enumerate(self._order) if matches_search(id_, search)]

    def place(self, positions: list[int], ids: list[int]) -> None:
        """Write ``ids`` into the given order positions, one for one.

        The ids must be a permutation of the ids currently at those positions.
        """
        for position, id_ in zip(positions, ids, strict=True):
            self._order[position] = id_

    def __contains__(self, id_: object) -> bool:
        return id_ in self._members

    def __iter__(self) -> Iterator[int]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)
