"""Item selection service.

Business logic for the id space: adding ids, selecting, unselecting and
reordering them, and paging through both lists. Every operation validates
its whole input before touching state, so a rejected call changes nothing.
"""

import math
from collections.abc import Callable, Sequence

import structlog

from idspace.services.items.exceptions import (
    EmptyIdList,
    IdsAlreadyExist,
    IdsNotFound,
    IdsNotSelected,
    InvalidIds,
)
from idspace.services.items.pagination import Page, PageRequest, normalize_search, paginate_list, paginate_stream
from idspace.services.items.reorder import reorder_window
from idspace.services.items.store import ItemStore
from idspace.utils.numbers import coerce_id, coerce_number, is_positive_integer, parse_count

logger = structlog.get_logger(__name__)


class ItemService:
    """Service for id space operations on one ItemStore."""

    def __init__(self, store: ItemStore):
        self.store = store

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_unselected(self, request: PageRequest) -> Page:
        """Page of existing ids that are not selected, in ascending order.

        Walks the id space from the start on every call.
        """
        with self.store.lock:
            return paginate_stream(self.store.iter_ids(), request, exclude=self.store.selection)

    def list_selected(self, request: PageRequest) -> Page:
        """Page of selected ids in selection order."""
        with self.store.lock:
            return paginate_list(self.store.selection.order, request)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add_ids(self, values: Sequence[object]) -> list[int]:
        """Introduce new ids into the id space.

        Non-finite values are dropped. Returns the accepted ids in request
        order; ids above the base range are stored, base ids need no storage.

        Raises:
            EmptyIdList: no values were passed
            InvalidIds: a value is not a positive integer
            IdsAlreadyExist: some ids already exist
        """
        if not values:
            raise EmptyIdList()

        numbers = [number for number in map(coerce_number, values) if math.isfinite(number)]
        if not all(is_positive_integer(number) for number in numbers):
            raise InvalidIds()
        ids = [int(number) for number in numbers]

        with self.store.lock:
            duplicates = [id_ for id_ in ids if self.store.exists(id_)]
            if duplicates:
                logger.info("Rejected existing ids", duplicates=duplicates)
                raise IdsAlreadyExist(duplicates)

            for id_ in ids:
                if not self.store.is_base_id(id_):
                    self.store.extra_ids.insert(id_)

        logger.info("Added ids", count=len(ids), extra_total=len(self.store.extra_ids))
        return ids

    def select_ids(self, values: Sequence[object]) -> tuple[list[int], list[int]]:
        """Append existing ids to the selection. Already selected ids are skipped.

        Returns (selected_order, newly_added).

        Raises:
            EmptyIdList: no values were passed
            IdsNotFound: some ids do not exist
        """
        if not values:
            raise EmptyIdList()

        with self.store.lock:
            ids, nonexistent = self._resolve(values, self.store.exists)
            if nonexistent:
                raise IdsNotFound(nonexistent)

            added = self.store.selection.add(ids)
            selected = self.store.selection.order

        logger.info("Selected ids", added=added, selected_total=len(selected))
        return selected, added

    def unselect_ids(self, values: Sequence[object]) -> list[int]:
        """Remove ids from the selection, keeping the order of the rest.

        Raises:
            EmptyIdList: no values were passed
            IdsNotSelected: some ids are not selected
        """
        if not values:
            raise EmptyIdList()

        with self.store.lock:
            selection = self.store.selection
            ids, not_selected = self._resolve(values, selection.__contains__)
            if not_selected:
                raise IdsNotSelected(not_selected)

            selection.remove(ids)
            selected = selection.order

        logger.info("Unselected ids", removed=len(set(ids)), selected_total=len(selected))
        return selected

    def reorder(self, values: Sequence[object], offset: object = 0, search: object = "") -> list[int]:
        """Reorder a window of the search-filtered selection.

        ``values`` is the new order of the window starting at ``offset`` in the
        selection filtered by ``search``. Ids outside the filtered view keep
        their positions. Returns the full selection order.

        Raises:
            ValidationError: see ``reorder.validate_window`` for each case
        """
        ids = self._reorder_ids(values)
        window_offset = parse_count(offset, 0)
        needle = normalize_search(search)

        with self.store.lock:
            reorder_window(self.store.selection, ids, window_offset, needle)
            selected = self.store.selection.order

        logger.info("Reordered selection", offset=window_offset, search=needle, window=ids)
        return selected

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _resolve(values: Sequence[object], accept: Callable[[int], bool]) -> tuple[list[int], list[object]]:
        """Split values into accepted ids and rejected values (as sent).

        Non-finite floats are reported as strings so the error body stays valid JSON.
        """
        ids: list[int] = []
        rejected: list[object] = []
        for value in values:
            id_ = coerce_id(value)
            if id_ is None and isinstance(value, float) and not math.isfinite(value):
                rejected.append(str(value))
            elif id_ is None or not accept(id_):
                rejected.append(value if id_ is None else id_)
            else:
                ids.append(id_)
        return ids, rejected

    @staticmethod
    def _reorder_ids(values: Sequence[object]) -> list[int | float]:
        """Coerce reorder ids, dropping non-finite values.

        Fractional values are kept as-is so they fail the selection check.
        """
        ids: list[int | float] = []
        for number in map(coerce_number, values):
            if not math.isfinite(number):
                continue
            ids.append(int(number) if number.is_integer() else number)
        return ids
