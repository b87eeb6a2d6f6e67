"""Product data-access layer.

Query functions take a session and return models or scalars. ProductAccessor
adapts the list/count queries to the CollectionAccessor protocol and turns
connection failures into AccessorUnavailable.
"""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession

from paged_catalog.exceptions import AccessorUnavailable
from paged_catalog.models import Product

_CONNECTION_ERRORS = (OperationalError, InterfaceError, PoolTimeoutError, OSError)


async def list_products(db: AsyncSession, offset: int, limit: int) -> list[Product]:
    """Return products in id order, starting at ``offset``."""
    stmt = select(Product).order_by(Product.id).offset(offset).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def count_products(db: AsyncSession) -> int:
    stmt = select(func.count(Product.id))
    result = await db.execute(stmt)
    return result.scalar_one()


async def get_product(db: AsyncSession, product_id: int) -> Product | None:
    return await db.get(Product, product_id)


async def get_product_by_sku(db: AsyncSession, sku: str) -> Product | None:
    stmt = select(Product).where(Product.sku == sku)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def insert_product(db: AsyncSession, name: str, sku: str, price: Decimal) -> Product:
    """Add a product and flush so id and timestamps are populated."""
    product = Product(name=name, sku=sku, price=price)
    db.add(product)
    await db.flush()
    await db.refresh(product)
    return product


@contextmanager
def _unavailable_on_connection_error(collection: str) -> Iterator[None]:
    try:
        yield
    except _CONNECTION_ERRORS as exc:
        raise AccessorUnavailable(collection, f"{collection} store is unavailable: {exc}") from exc


class ProductAccessor:
    """CollectionAccessor over the products table, ordered by id."""

    collection = "products"

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def count(self) -> int:
        with _unavailable_on_connection_error(self.collection):
            return await count_products(self._db)

    async def slice(self, offset: int, limit: int) -> Sequence[Product]:
        with _unavailable_on_connection_error(self.collection):
            return await list_products(self._db, offset, limit)
