"""Mapper for OrderItem ORM ↔ Domain conversion."""

from order_service.domain.common.timestamps import ensure_utc
from order_service.domain.common.value_objects import OrderId, OrderItemId, ProductId
from order_service.domain.ordering.entities import OrderItem
from order_service.models import OrderItem as OrderItemORM


class OrderItemMapper:
    """Mapper for OrderItem ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: OrderItemORM) -> OrderItem:
        """Convert ORM model to domain entity."""
        return OrderItem.create_with_id(
            id=OrderItemId(orm_model.id),
            order_id=OrderId(orm_model.order_id),
            product_id=ProductId(orm_model.product_id),
            category=orm_model.category,
            price=orm_model.price,
            quantity=orm_model.quantity,
            created_at=ensure_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: OrderItem) -> OrderItemORM:
        """Convert domain entity to a new ORM model (items are never updated)."""
        return OrderItemORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            order_id=domain_entity.order_id.value,
            product_id=domain_entity.product_id.value,
            category=domain_entity.category,
            price=domain_entity.price,
            quantity=domain_entity.quantity,
        )
