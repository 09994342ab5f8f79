"""FastAPI dependencies for service injection."""

from typing import Annotated

from fastapi import Depends, Request

from idspace.services.items.item_service import ItemService
from idspace.services.items.store import ItemStore


def get_item_store(request: Request) -> ItemStore:
    """Get the process-wide ItemStore held by the application."""
    store: ItemStore = request.app.state.item_store
    return store


def get_item_service(
    store: Annotated[ItemStore, Depends(get_item_store)],
) -> ItemService:
    """Get an ItemService bound to the application's store."""
    return ItemService(store)


# Type aliases for cleaner endpoint signatures
ItemServiceDep = Annotated[ItemService, Depends(get_item_service)]
