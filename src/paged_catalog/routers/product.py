"""Product endpoints."""

from fastapi import APIRouter

from paged_catalog.dependencies import DB, Paging, Products
from paged_catalog.schemas.product import ProductCreate, ProductPageResponse, ProductResponse
from paged_catalog.services import product as product_service

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=ProductPageResponse, status_code=200)
async def list_products(paging: Paging, accessor: Products) -> ProductPageResponse:
    """List one page of products: ``GET /products?page=0&size=10``."""
    page = await product_service.get_products(accessor, paging)
    return ProductPageResponse.model_validate(page)


@router.get("/{product_id}", response_model=ProductResponse, status_code=200)
async def read_product(db: DB, product_id: int) -> ProductResponse:
    product = await product_service.get_product(db, product_id)
    return ProductResponse.model_validate(product)


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(db: DB, body: ProductCreate) -> ProductResponse:
    product = await product_service.create_product(
        db, name=body.name, sku=body.sku, price=body.price
    )
    return ProductResponse.model_validate(product)
