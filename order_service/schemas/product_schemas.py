"""Pydantic schemas for catalog products."""

from datetime import datetime as dt
from uuid import UUID

from pydantic import BaseModel, Field

from order_service.domain.catalog.entities.product import Product


class ProductCreateRequest(BaseModel):
    """Schema for registering a product in the catalog."""

    name: str = Field(..., description="Product name")
    category: str = Field(..., description="Product category, e.g. COFFEE_BEAN_PACKAGE")
    price: int = Field(..., description="Unit price in minor currency units")
    description: str | None = Field(None, description="Free-form description")


class ProductResponse(BaseModel):
    """Schema for a catalog product."""

    product_id: UUID
    name: str
    category: str
    price: int
    description: str | None
    created_at: dt | None = None

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls(
            product_id=product.id.value,
            name=product.name,
            category=product.category,
            price=product.price,
            description=product.description,
            created_at=product.created_at,
        )
