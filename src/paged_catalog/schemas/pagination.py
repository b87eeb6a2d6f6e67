"""Offset pagination types shared by all list endpoints.

PageRequest, PageDefaults and Page[T] are plain frozen dataclasses used by
services and accessors. PageResponse[T] is the Pydantic model the routers
return, built from a Page with ``model_validate``.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from pydantic import BaseModel

from paged_catalog.exceptions import InvalidPageRequest


@dataclass(frozen=True)
class PageDefaults:
    """Fallbacks and upper bound applied when validating raw page parameters."""

    default_page_index: int = 0
    default_page_size: int = 10
    max_page_size: int = 100


@dataclass(frozen=True)
class PageRequest:
    """A validated request for one page of a collection.

    Only the lower bounds are checked here. The ``max_page_size`` bound comes
    from configuration and is enforced by
    ``services.pagination.validate_page_request``.
    """

    page_index: int
    page_size: int

    def __post_init__(self) -> None:
        if self.page_index < 0:
            raise InvalidPageRequest(
                "page", self.page_index, f"page must be >= 0, got {self.page_index}"
            )
        if self.page_size < 1:
            raise InvalidPageRequest(
                "size", self.page_size, f"size must be >= 1, got {self.page_size}"
            )

    @property
    def offset(self) -> int:
        """Position of the first element of this page in the collection."""
        return self.page_index * self.page_size


@dataclass(frozen=True)
class Page[T]:
    """One page of a collection plus its position and the collection size.

    ``items`` holds at most ``page_size`` elements and is stored as a tuple
    so the page can be shared freely once built::

        page = await get_page(accessor, PageRequest(page_index=2, page_size=10))
        page.items            # elements 20..29 (fewer at the end)
        page.total_pages      # ceil(total_elements / page_size)
    """

    items: Sequence[T]
    page_index: int
    page_size: int
    total_elements: int
    total_pages: int

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @property
    def number_of_elements(self) -> int:
        return len(self.items)

    @property
    def has_next(self) -> bool:
        return self.page_index + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page_index > 0


class PageResponse[T](BaseModel):
    """Pydantic model for paginated HTTP responses.

    ``from_attributes`` lets ``model_validate`` read a ``Page`` dataclass
    directly, including its ``has_next``/``has_previous`` properties::

        ProductPageResponse = PageResponse[ProductResponse]
        return ProductPageResponse.model_validate(page)
    """

    model_config = {"from_attributes": True}

    items: list[T]
    page_index: int
    page_size: int
    total_elements: int
    total_pages: int
    has_next: bool
    has_previous: bool
