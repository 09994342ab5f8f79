"""Id space items: extra ids, selection, pagination and reordering."""

from idspace.services.items.id_space import BASE_MAX_ID
from idspace.services.items.item_service import ItemService
from idspace.services.items.pagination import PAGE_LIMIT, Page, PageRequest
from idspace.services.items.store import ItemStore

__all__ = [
    "BASE_MAX_ID",
    "PAGE_LIMIT",
    "ItemService",
    "ItemStore",
    "Page",
    "PageRequest",
]
