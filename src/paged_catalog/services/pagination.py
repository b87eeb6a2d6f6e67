"""Offset pagination core.

validate_page_request turns raw query parameters into a bounded PageRequest;
get_page reads one page from any CollectionAccessor. Neither function logs,
retries or catches: errors reach the request boundary unchanged.
"""

from collections.abc import Sequence

from paged_catalog.exceptions import InvalidPageRequest
from paged_catalog.repositories.base import CollectionAccessor
from paged_catalog.schemas.pagination import Page, PageDefaults, PageRequest


def validate_page_request(
    raw_page_index: int | None,
    raw_page_size: int | None,
    defaults: PageDefaults,
) -> PageRequest:
    """Build a PageRequest from optional raw inputs.

    Missing values fall back to ``defaults``. Raises InvalidPageRequest when
    the page index is negative or the size is outside ``1..max_page_size``.
    """
    page_index = defaults.default_page_index if raw_page_index is None else raw_page_index
    page_size = defaults.default_page_size if raw_page_size is None else raw_page_size

    if page_size > defaults.max_page_size:
        raise InvalidPageRequest(
            "size",
            page_size,
            f"size must be <= {defaults.max_page_size}, got {page_size}",
        )
    return PageRequest(page_index=page_index, page_size=page_size)


def count_pages(total_elements: int, page_size: int) -> int:
    """Return ceil(total_elements / page_size), 0 for an empty collection."""
    if total_elements == 0:
        return 0
    return (total_elements + page_size - 1) // page_size


async def get_page[T](accessor: CollectionAccessor[T], request: PageRequest) -> Page[T]:
    """Fetch one page of ``accessor``.

    Two reads, in this order: count() then slice(). They are not atomic, so a
    concurrent write between them can make ``total_elements`` and ``items``
    disagree momentarily. A page past the end is an empty page, not an error;
    slice() is not called for it, since its offset may not fit the store's
    integer type.
    """
    total = await accessor.count()
    items: Sequence[T] = ()
    if request.offset < total:
        items = await accessor.slice(request.offset, request.page_size)
    return Page(
        items=tuple(items),
        page_index=request.page_index,
        page_size=request.page_size,
        total_elements=total,
        total_pages=count_pages(total, request.page_size),
    )
