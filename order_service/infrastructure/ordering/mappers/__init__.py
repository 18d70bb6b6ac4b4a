from .order_item_mapper import OrderItemMapper
from .order_mapper import OrderMapper

__all__ = ["OrderItemMapper", "OrderMapper"]
