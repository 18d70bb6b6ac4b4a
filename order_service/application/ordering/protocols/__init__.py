from .order_item_repository import OrderItemRepositoryProtocol
from .order_repository import OrderRepositoryProtocol

__all__ = ["OrderItemRepositoryProtocol", "OrderRepositoryProtocol"]
