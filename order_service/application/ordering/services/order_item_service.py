"""Persistence-facing service for order items."""

import structlog

from order_service.application.ordering.protocols.order_item_repository import (
    OrderItemRepositoryProtocol,
)
from order_service.domain.common.value_objects import OrderId
from order_service.domain.ordering.entities import OrderItem

logger = structlog.get_logger(__name__)


class OrderItemService:
    def __init__(self, order_item_repository: OrderItemRepositoryProtocol) -> None:
        self.order_item_repository = order_item_repository

    def create_batch(self, items: list[OrderItem]) -> list[OrderItem]:
        """Persist all items of an order in a single batch write."""
        if not items:
            return []

        saved = self.order_item_repository.save_all(items)
        logger.debug("created_order_items", order_id=str(items[0].order_id), count=len(saved))
        return saved

    def get_for_order(self, order_id: OrderId) -> list[OrderItem]:
        return self.order_item_repository.find_by_order(order_id)
