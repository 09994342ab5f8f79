"""HTTP client for the idspace API."""

from typing import Any

import httpx
import structlog

from idspace.config import settings
from idspace.services.items.pagination import PAGE_LIMIT, Page
from idspace.utils.request_retry import RequestRetryConfig, get_request_retrying

logger = structlog.get_logger(__name__)

ITEMS_PATH = "/api/items"


class ApiError(Exception):
    """The API answered with an error status."""

    def __init__(self, status_code: int, body: dict[str, Any]):
        self.status_code = status_code
        self.body = body
        self.message = str(body.get("message") or f"HTTP {status_code}")
        super().__init__(f"{status_code}: {self.message}")


class ItemsClient:
    """Synchronous client for the items endpoints.

    Network errors are retried with exponential backoff; error responses are
    raised as ApiError right away.

    Usage:
        with ItemsClient("http://127.0.0.1:4000") as client:
            client.add([1000001])
            selected, added = client.select([1000001])
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.Client | None = None,
        retry: RequestRetryConfig | None = None,
        timeout: float = 10.0,
    ):
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_url or settings.api_url, timeout=timeout)
        self.retry = retry

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ItemsClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        for attempt in get_request_retrying(self.retry):
            with attempt:
                response = self._client.request(method, path, **kwargs)

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {"message": response.text}
            logger.debug("API error", method=method, path=path, status_code=response.status_code)
            raise ApiError(response.status_code, body if isinstance(body, dict) else {"message": str(body)})

        result: dict[str, Any] = response.json()
        return result

    def _page(self, path: str, limit: int, offset: int, search: str) -> Page:
        params: dict[str, str | int] = {"limit": limit, "offset": offset}
        if search:
            params["search"] = search
        data = self._request("GET", path, params=params)
        return Page(items=data["items"], has_more=data["hasMore"])

    def health(self) -> dict[str, Any]:
        return self._request("GET", "/api/health")

    def list_unselected(self, *, limit: int = PAGE_LIMIT, offset: int = 0, search: str = "") -> Page:
        """Get a page of unselected ids."""
        return self._page(f"{ITEMS_PATH}/unselected", limit, offset, search)

    def list_selected(self, *, limit: int = PAGE_LIMIT, offset: int = 0, search: str = "") -> Page:
        """Get a page of selected ids in selection order."""
        return self._page(f"{ITEMS_PATH}/selected", limit, offset, search)

    def add(self, ids: list[int]) -> list[int]:
        """Add new ids. Returns the accepted ids."""
        return self._request("POST", f"{ITEMS_PATH}/add", json={"ids": ids})["added"]

    def select(self, ids: list[int]) -> tuple[list[int], list[int]]:
        """Select ids. Returns (selected_order, newly_added)."""
        data = self._request("POST", f"{ITEMS_PATH}/select", json={"ids": ids})
        return data["selected"], data["added"]

    def unselect(self, ids: list[int]) -> list[int]:
        """Unselect ids. Returns the selection order."""
        return self._request("POST", f"{ITEMS_PATH}/unselect", json={"ids": ids})["selected"]

    def reorder(self, ids: list[int], *, offset: int = 0, search: str = "") -> list[int]:
        """Reorder a window of the filtered selection. Returns the selection order."""
        body = {"ids": ids, "offset": offset, "search": search}
        return self._request("POST", f"{ITEMS_PATH}/reorder", json=body)["selected"]
