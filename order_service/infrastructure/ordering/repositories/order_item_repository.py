"""Repository for OrderItem domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from order_service.domain.common.value_objects import OrderId
from order_service.domain.ordering.entities import OrderItem
from order_service.infrastructure.ordering.mappers.order_item_mapper import OrderItemMapper
from order_service.models import OrderItem as OrderItemORM


class OrderItemRepository:
    """Repository for OrderItem domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = OrderItemMapper()

    def save_all(self, items: list[OrderItem]) -> list[OrderItem]:
        """
        Insert all items in one flush.

        Returns:
            Saved items with database-generated ids, in the given order
        """
        orm_models = [self.mapper.to_orm(item) for item in items]
        self.db.add_all(orm_models)
        self.db.flush()
        for orm_model in orm_models:
            self.db.refresh(orm_model)
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_order(self, order_id: OrderId) -> list[OrderItem]:
        """Get all items of an order in insertion order."""
        stmt = (
            select(OrderItemORM)
            .where(OrderItemORM.order_id == order_id.value)
            .order_by(OrderItemORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]
