"""Protocol for OrderItem repository."""

from typing import Protocol

from order_service.domain.common.value_objects import OrderId
from order_service.domain.ordering.entities import OrderItem


class OrderItemRepositoryProtocol(Protocol):
    """Interface for OrderItem persistence."""

    def save_all(self, items: list[OrderItem]) -> list[OrderItem]: ...

    def find_by_order(self, order_id: OrderId) -> list[OrderItem]: ...
