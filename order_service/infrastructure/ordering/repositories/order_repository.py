"""Repository for Order domain entities."""

from datetime import datetime

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from order_service.domain.common.value_objects import OrderId
from order_service.domain.ordering.entities import Order, OrderStatus
from order_service.infrastructure.ordering.mappers.order_mapper import OrderMapper
from order_service.models import Order as OrderORM


class OrderRepository:
    """Repository for Order domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = OrderMapper()

    def save(self, order: Order) -> Order:
        """
        Insert a new order.

        Orders are never updated one by one; status changes go through
        update_status_in_range.
        """
        orm_model = self.mapper.to_orm(order)
        self.db.add(orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def find_by_id(self, order_id: OrderId) -> Order | None:
        stmt = select(OrderORM).where(OrderORM.id == order_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def delete_by_id(self, order_id: OrderId) -> None:
        """
        Delete an order by id.

        Items go with it through the relationship cascade (and the
        ON DELETE CASCADE foreign key where the database enforces it).
        """
        orm_model = self.db.get(OrderORM, order_id.value)
        if orm_model is None:
            return
        self.db.delete(orm_model)
        self.db.flush()

    def update_status_in_range(self, status: OrderStatus, start: datetime, end: datetime) -> int:
        """
        Move every PLACED order created in [start, end) to the given status.

        Returns:
            Number of orders updated
        """
        stmt = (
            update(OrderORM)
            .where(
                OrderORM.created_at >= start,
                OrderORM.created_at < end,
                OrderORM.status == OrderStatus.PLACED,
            )
            .values(status=status, updated_at=func.now())
            .execution_options(synchronize_session="fetch")
        )
        result = self.db.execute(stmt)
        self.db.flush()
        return result.rowcount or 0
