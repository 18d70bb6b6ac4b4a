from .order_item_repository import OrderItemRepository
from .order_repository import OrderRepository

__all__ = ["OrderItemRepository", "OrderRepository"]
