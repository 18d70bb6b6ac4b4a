from .order_schemas import (
    CreateOrderRequest,
    OrderItemRequest,
    OrderItemResponse,
    OrderResponse,
)
from .product_schemas import ProductCreateRequest, ProductResponse

__all__ = [
    "CreateOrderRequest",
    "OrderItemRequest",
    "OrderItemResponse",
    "OrderResponse",
    "ProductCreateRequest",
    "ProductResponse",
]
