"""Value objects shared across domain modules."""

from .ids import OrderId, OrderItemId, ProductId

__all__ = [
    "OrderId",
    "OrderItemId",
    "ProductId",
]
