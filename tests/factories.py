"""Factory functions for building products in tests."""

from datetime import UTC, datetime
from decimal import Decimal

from paged_catalog.models import Product
from paged_catalog.schemas.product import ProductResponse

CREATED_AT = datetime(2026, 1, 15, 9, 30, tzinfo=UTC)


def make_product(
    *,
    name: str = "Desk Lamp",
    sku: str = "LAMP-0001",
    price: Decimal = Decimal("24.90"),
) -> Product:
    return Product(name=name, sku=sku, price=price)


def make_product_response(product_id: int) -> ProductResponse:
    """A serialized product, for accessors that don't touch the database."""
    return ProductResponse(
        id=product_id,
        name=f"Product {product_id}",
        sku=f"SKU-{product_id:04d}",
        price=Decimal("9.99"),
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )
