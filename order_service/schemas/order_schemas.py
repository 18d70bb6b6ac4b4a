"""Pydantic schemas for order requests and responses."""

from datetime import datetime as dt
from uuid import UUID

from pydantic import BaseModel, Field

from order_service.domain.ordering.entities import Order, OrderItem, OrderStatus


class OrderItemRequest(BaseModel):
    """One requested line of a new order."""

    product_id: UUID = Field(..., description="Catalog product to order")
    quantity: int = Field(..., description="Number of units")


class CreateOrderRequest(BaseModel):
    """Schema for placing an order."""

    email: str = Field(..., description="Customer email address")
    address: str = Field(..., description="Delivery address")
    postcode: str = Field(..., description="Delivery postcode")
    items: list[OrderItemRequest] = Field(..., description="Requested lines, in order")


class OrderItemResponse(BaseModel):
    """Schema for one order line in a response."""

    product_id: UUID
    category: str
    price: int = Field(..., description="Unit price captured when the order was placed")
    quantity: int

    @classmethod
    def from_domain(cls, item: OrderItem) -> "OrderItemResponse":
        return cls(
            product_id=item.product_id.value,
            category=item.category,
            price=item.price,
            quantity=item.quantity,
        )


class OrderResponse(BaseModel):
    """Schema for an order together with its items."""

    order_id: UUID
    email: str
    address: str
    postcode: str
    order_status: OrderStatus
    created_at: dt
    updated_at: dt | None = None
    order_items: list[OrderItemResponse] = Field(default_factory=list)

    @classmethod
    def of(cls, order: Order, order_items: list[OrderItemResponse]) -> "OrderResponse":
        """Compose a response from an order and its already-mapped items."""
        return cls(
            order_id=order.id.value,
            email=order.email,
            address=order.address,
            postcode=order.postcode,
            order_status=order.status,
            created_at=order.created_at,
            updated_at=order.updated_at,
            order_items=order_items,
        )
