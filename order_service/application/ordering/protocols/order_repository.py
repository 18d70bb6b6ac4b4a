"""Protocol for Order repository."""

from datetime import datetime
from typing import Protocol

from order_service.domain.common.value_objects import OrderId
from order_service.domain.ordering.entities import Order, OrderStatus


class OrderRepositoryProtocol(Protocol):
    """Interface for Order persistence."""

    def save(self, order: Order) -> Order: ...

    def find_by_id(self, order_id: OrderId) -> Order | None: ...

    def delete_by_id(self, order_id: OrderId) -> None: ...

    def update_status_in_range(
        self, status: OrderStatus, start: datetime, end: datetime
    ) -> int: ...
