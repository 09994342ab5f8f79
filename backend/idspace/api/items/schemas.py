"""API schemas for items endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from idspace.services.items.pagination import Page

# =============================================================================
# Response Schemas
# =============================================================================


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageResponse(CamelModel):
    """One page of ids."""

    items: list[int]
    has_more: bool

    @classmethod
    def from_page(cls, page: Page) -> "PageResponse":
        """Create response from a service Page."""
        return cls(items=page.items, has_more=page.has_more)


class AddResponse(CamelModel):
    """Ids accepted by an add request."""

    added: list[int]


class SelectResponse(CamelModel):
    """Selection order after a select request, plus the newly selected ids."""

    selected: list[int]
    added: list[int]


class SelectionResponse(CamelModel):
    """Full selection order."""

    selected: list[int]


# =============================================================================
# Request Schemas
# =============================================================================


class IdsRequest(BaseModel):
    """Request body carrying a list of ids.

    Values are kept loose here; the service coerces and validates them so
    that bad ids produce domain errors instead of schema errors.
    """

    ids: list[Any] = Field(default_factory=list)

    @field_validator("ids", mode="before")
    @classmethod
    def ids_as_list(cls, value: Any) -> list[Any]:
        """Anything that is not a list counts as no ids."""
        return value if isinstance(value, list) else []


class ReorderRequest(IdsRequest):
    """Request body for reordering a window of the filtered selection."""

    offset: Any = 0
    search: Any = ""
