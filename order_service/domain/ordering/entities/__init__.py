from .order import Order, OrderStatus
from .order_item import OrderItem

__all__ = ["Order", "OrderItem", "OrderStatus"]
