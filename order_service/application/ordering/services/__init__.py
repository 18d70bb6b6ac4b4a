from .order_item_service import OrderItemService

__all__ = ["OrderItemService"]
