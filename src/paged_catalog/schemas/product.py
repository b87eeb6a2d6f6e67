"""Product request and response schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from paged_catalog.schemas.pagination import PageResponse


class ProductCreate(BaseModel):
    """Body of POST /products."""

    name: str = Field(min_length=1, max_length=100)
    sku: str = Field(min_length=1, max_length=40)
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)


class ProductResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    sku: str
    price: Decimal
    created_at: datetime
    updated_at: datetime


ProductPageResponse = PageResponse[ProductResponse]
