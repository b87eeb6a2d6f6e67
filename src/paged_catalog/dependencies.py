"""Shared FastAPI dependencies.

Type aliases routers import. Kept out of main.py to avoid circular imports
when routers are registered there.
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from paged_catalog.config import settings
from paged_catalog.db.session import get_db
from paged_catalog.repositories.product import ProductAccessor
from paged_catalog.schemas.pagination import PageRequest
from paged_catalog.services.pagination import validate_page_request

DB = Annotated[AsyncSession, Depends(get_db)]


def get_page_request(
    page: Annotated[int | None, Query(description="Zero-based page index")] = None,
    size: Annotated[int | None, Query(description="Number of items per page")] = None,
) -> PageRequest:
    """Map ``?page=&size=`` onto a validated PageRequest.

    Bounds are checked by validate_page_request, not by Query constraints, so
    out-of-range values surface as InvalidPageRequest (400) rather than 422.
    """
    return validate_page_request(page, size, settings.page_defaults)


def get_product_accessor(db: DB) -> ProductAccessor:
    return ProductAccessor(db)


Paging = Annotated[PageRequest, Depends(get_page_request)]
Products = Annotated[ProductAccessor, Depends(get_product_accessor)]
