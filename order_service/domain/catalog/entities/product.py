"""Product entity owned by the catalog."""

from dataclasses import dataclass
from datetime import datetime

from order_service.domain.common.entity import Entity
from order_service.domain.common.exceptions import ValidationError
from order_service.domain.common.value_objects.ids import ProductId


@dataclass
class Product(Entity[ProductId]):
    """
    Product that customers can order.

    Business Rules:
    - Name and category must not be blank
    - Price is expressed in minor currency units and cannot be negative
    """

    id: ProductId
    name: str
    category: str
    price: int
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Product name cannot be empty", field="name")
        if not self.category or not self.category.strip():
            raise ValidationError("Product category cannot be empty", field="category")
        if self.price < 0:
            raise ValidationError(
                "Product price cannot be negative", field="price", value=self.price
            )

    @classmethod
    def create(
        cls,
        name: str,
        category: str,
        price: int,
        description: str | None = None,
    ) -> "Product":
        """Create a new product with a freshly generated identifier."""
        return cls(
            id=ProductId.generate(),
            name=name.strip(),
            category=category.strip(),
            price=price,
            description=description.strip() if description else None,
        )

    @classmethod
    def create_with_id(
        cls,
        id: ProductId,
        name: str,
        category: str,
        price: int,
        description: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Product":
        """Reconstitute a product from persistence."""
        return cls(
            id=id,
            name=name,
            category=category,
            price=price,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )
