"""Item paging and mutation API endpoints.

Service errors propagate to the handlers in ``idspace.api.errors``, which
turn them into 400/404/409 JSON responses.
"""

from fastapi import APIRouter

from idspace.api.items.dependencies import ItemServiceDep
from idspace.api.items.schemas import (
    AddResponse,
    IdsRequest,
    PageResponse,
    ReorderRequest,
    SelectionResponse,
    SelectResponse,
)
from idspace.services.items.pagination import PageRequest

router = APIRouter(prefix="/items", tags=["items"])


@router.get("/unselected", response_model=PageResponse, operation_id="listUnselectedItems")
async def list_unselected(
    service: ItemServiceDep,
    limit: str | None = None,
    offset: str | None = None,
    search: str | None = None,
) -> PageResponse:
    """List existing ids that are not selected, ascending."""
    page = service.list_unselected(PageRequest.from_params(limit, offset, search))
    return PageResponse.from_page(page)


@router.get("/selected", response_model=PageResponse, operation_id="listSelectedItems")
async def list_selected(
    service: ItemServiceDep,
    limit: str | None = None,
    offset: str | None = None,
    search: str | None = None,
) -> PageResponse:
    """List selected ids in selection order."""
    page = service.list_selected(PageRequest.from_params(limit, offset, search))
    return PageResponse.from_page(page)


@router.post("/add", response_model=AddResponse, operation_id="addItems")
async def add_items(body: IdsRequest, service: ItemServiceDep) -> AddResponse:
    """Add new ids to the id space."""
    return AddResponse(added=service.add_ids(body.ids))


@router.post("/select", response_model=SelectResponse, operation_id="selectItems")
async def select_items(body: IdsRequest, service: ItemServiceDep) -> SelectResponse:
    """Append ids to the selection."""
    selected, added = service.select_ids(body.ids)
    return SelectResponse(selected=selected, added=added)


@router.post("/unselect", response_model=SelectionResponse, operation_id="unselectItems")
async def unselect_items(body: IdsRequest, service: ItemServiceDep) -> SelectionResponse:
    """Remove ids from the selection."""
    return SelectionResponse(selected=service.unselect_ids(body.ids))


@router.post("/reorder", response_model=SelectionResponse, operation_id="reorderItems")
async def reorder_items(body: ReorderRequest, service: ItemServiceDep) -> SelectionResponse:
    """Reorder a window of the search-filtered selection."""
    selected = service.reorder(body.ids, offset=body.offset, search=body.search)
    return SelectionResponse(selected=selected)
