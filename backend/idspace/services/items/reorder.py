"""Reorder a window of the search-filtered selection.

A client sees the selection through a search filter and reorders a contiguous
window of that filtered view. The window is checked against current state and
the new order is written back through the filter, so ids hidden by the search
keep their positions.
"""

from collections.abc import Sequence

from idspace.services.items.exceptions import (
    DuplicateReorderIds,
    EmptyIdList,
    ReorderIdsNotSelected,
    ReorderWindowMismatch,
    ReorderWindowOutOfRange,
)
from idspace.services.items.selection import Selection


def validate_window(selection: Selection, ids: Sequence[int | float], offset: int, search: str) -> list[int]:
    """Check a reorder window and return the order positions it covers.

    Raises a ValidationError subclass for each failed check, in this order:
    empty list, duplicates, unselected ids, window out of range, window
    contents differ from ``ids``.
    """
    if not ids:
        raise EmptyIdList()

    requested = set(ids)
    if len(requested) != len(ids):
        raise DuplicateReorderIds()

    if not all(id_ in selection for id_ in ids):
        raise ReorderIdsNotSelected()

    # filtered view index -> selection order index
    positions = selection.filtered_positions(search)
    if offset + len(ids) > len(positions):
        raise ReorderWindowOutOfRange()

    window_positions = positions[offset : offset + len(ids)]
    order = selection.order
    if {order[position] for position in window_positions} != requested:
        raise ReorderWindowMismatch()

    return window_positions


def reorder_window(selection: Selection, ids: Sequence[int | float], offset: int, search: str) -> None:
    """Validate the window, then apply the new order in place."""
    window_positions = validate_window(selection, ids, offset, search)
    # validated ids are all selected, hence ints
    selection.place(window_positions, [int(id_) for id_ in ids])
