"""Product use cases.

Paging is delegated to the generic pagination core; the remaining
operations enforce the not-found and duplicate-sku rules.
"""

from decimal import Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from paged_catalog.exceptions import ConflictError, NotFoundError
from paged_catalog.logging import get_logger
from paged_catalog.models import Product
from paged_catalog.repositories import product as product_repo
from paged_catalog.repositories.base import CollectionAccessor
from paged_catalog.schemas.pagination import Page, PageRequest
from paged_catalog.services.pagination import get_page

logger = get_logger(__name__)


async def get_products(
    accessor: CollectionAccessor[Product], request: PageRequest
) -> Page[Product]:
    """Return one page of products in id order."""
    return await get_page(accessor, request)


async def get_product(db: AsyncSession, product_id: int) -> Product:
    product = await product_repo.get_product(db, product_id)
    if product is None:
        raise NotFoundError("Product", product_id)
    return product


async def create_product(db: AsyncSession, name: str, sku: str, price: Decimal) -> Product:
    """Create a product. Raises ConflictError if ``sku`` is already taken.

    The lookup catches the common case; the savepoint catches a concurrent
    insert of the same sku that lands between the lookup and the flush.
    """
    if await product_repo.get_product_by_sku(db, sku) is not None:
        raise ConflictError(f"Product with sku {sku!r} already exists")

    try:
        async with db.begin_nested():
            product = await product_repo.insert_product(db, name=name, sku=sku, price=price)
    except IntegrityError as exc:
        raise ConflictError(f"Product with sku {sku!r} already exists") from exc

    logger.info("product_created", product_id=product.id, sku=sku)
    return product
