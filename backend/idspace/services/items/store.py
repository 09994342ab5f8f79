"""Process-wide in-memory item state."""

import threading
from collections.abc import Iterator
from dataclasses import dataclass, field

from idspace.services.items.extra_ids import ExtraIdStore
from idspace.services.items.id_space import BASE_MAX_ID, is_base_id, iter_id_space
from idspace.services.items.selection import Selection


@dataclass
class ItemStore:
    """Extra ids and the selection, guarded by a single lock.

    State is volatile: one store lives for the lifetime of the process.
    """

    base_max: int = BASE_MAX_ID
    extra_ids: ExtraIdStore = field(default_factory=ExtraIdStore)
    selection: Selection = field(default_factory=Selection)
    lock: threading.RLock = field(default_factory=threading.RLock)

    def is_base_id(self, id_: int) -> bool:
        return is_base_id(id_, self.base_max)

    def exists(self, id_: int) -> bool:
        """An id exists if it is in the base range or was added."""
        return self.is_base_id(id_) or id_ in self.extra_ids

    def iter_ids(self) -> Iterator[int]:
        """Fresh ascending walk over every existing id."""
        return iter_id_space(self.extra_ids.ids, self.base_max)
