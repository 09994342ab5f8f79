"""Search-filtered offset/limit pagination over ids."""

from collections.abc import Container, Iterable, Sequence
from dataclasses import dataclass

from idspace.utils.numbers import parse_count

# Hard cap on page size, whatever the client asks for
PAGE_LIMIT = 20


def normalize_search(search: object) -> str:
    """Strip and lower-case a search term. ``None`` means no search."""
    if search is None:
        return ""
    return str(search).strip().lower()


def matches_search(id_: int, needle: str) -> bool:
    """Case-insensitive substring match against the decimal form of the id."""
    return not needle or needle in str(id_).lower()


@dataclass(frozen=True)
class PageRequest:
    """Normalized pagination parameters."""

    limit: int = PAGE_LIMIT
    offset: int = 0
    search: str = ""

    @classmethod
    def from_params(
        cls,
        limit: object = None,
        offset: object = None,
        search: object = None,
    ) -> "PageRequest":
        """Build a request from loose query values.

        Missing, non-numeric or non-positive limits fall back to PAGE_LIMIT and
        larger ones are clamped to it. Bad offsets become 0.
        """
        page_limit = parse_count(limit, PAGE_LIMIT)
        if page_limit <= 0:
            page_limit = PAGE_LIMIT
        return cls(
            limit=min(page_limit, PAGE_LIMIT),
            offset=parse_count(offset, 0),
            search=normalize_search(search),
        )


@dataclass(frozen=True)
class Page:
    """One page of ids and whether more matches follow it."""

    items: list[int]
    has_more: bool


def paginate_stream(ids: Iterable[int], request: PageRequest, exclude: Container[int] = ()) -> Page:
    """Page through an ascending id stream.

    Skips excluded and non-matching ids, then ``offset`` matches, then collects
    up to ``limit``. Stops reading the stream at the first match past the page.
    """
    items: list[int] = []
    skipped = 0

    for id_ in ids:
        if id_ in exclude:
            continue
        if not matches_search(id_, request.search):
            continue
        if skipped < request.offset:
            skipped += 1
            continue
        if len(items) >= request.limit:
            return Page(items=items, has_more=True)
        items.append(id_)

    return Page(items=items, has_more=False)


def filter_by_search(ids: Iterable[int], search: str) -> list[int]:
    """Ids matching the search, in their original order."""
    return [id_ for id_ in ids if matches_search(id_, search)]


def paginate_list(ids: Sequence[int], request: PageRequest) -> Page:
    """Page through an ordered list, keeping its order."""
    filtered = filter_by_search(ids, request.search)
    items = filtered[request.offset : request.offset + request.limit]
    return Page(items=items, has_more=request.offset + len(items) < len(filtered))
