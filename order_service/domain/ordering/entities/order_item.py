"""OrderItem entity."""

from dataclasses import dataclass
from datetime import datetime

from order_service.domain.catalog.entities.product import Product
from order_service.domain.common.entity import Entity
from order_service.domain.common.exceptions import InvariantViolationError
from order_service.domain.common.value_objects.ids import OrderId, OrderItemId, ProductId
from order_service.domain.ordering.entities.order import Order


@dataclass
class OrderItem(Entity[OrderItemId]):
    """
    One product line of an order.

    Category and price are copied from the product when the order is placed,
    so later catalog changes do not alter past orders.

    Business Rules:
    - Quantity must be positive
    - Items are only created together with their order
    """

    id: OrderItemId
    order_id: OrderId
    product_id: ProductId
    category: str
    price: int
    quantity: int
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.quantity <= 0:
            raise InvariantViolationError("OrderItem", "quantity must be positive")
        if self.price < 0:
            raise InvariantViolationError("OrderItem", "price cannot be negative")

    @classmethod
    def create(cls, order: Order, product: Product, quantity: int) -> "OrderItem":
        """
        Create an item for a product within an order.

        Args:
            order: The order that owns this item
            product: The resolved catalog product
            quantity: Number of units requested

        Returns:
            New OrderItem instance (id assigned on save)
        """
        return cls(
            id=OrderItemId.generate(),
            order_id=order.id,
            product_id=product.id,
            category=product.category,
            price=product.price,
            quantity=quantity,
        )

    @classmethod
    def create_with_id(
        cls,
        id: OrderItemId,
        order_id: OrderId,
        product_id: ProductId,
        category: str,
        price: int,
        quantity: int,
        created_at: datetime | None,
    ) -> "OrderItem":
        """Reconstitute an order item from persistence."""
        return cls(
            id=id,
            order_id=order_id,
            product_id=product_id,
            category=category,
            price=price,
            quantity=quantity,
            created_at=created_at,
        )
