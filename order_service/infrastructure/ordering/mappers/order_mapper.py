"""Mapper for Order ORM ↔ Domain conversion."""

from order_service.domain.common.timestamps import ensure_utc
from order_service.domain.common.value_objects import OrderId
from order_service.domain.ordering.entities import Order
from order_service.models import Order as OrderORM


class OrderMapper:
    """Mapper for Order ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: OrderORM) -> Order:
        """Convert ORM model to domain entity."""
        return Order.create_with_id(
            id=OrderId(orm_model.id),
            email=orm_model.email,
            address=orm_model.address,
            postcode=orm_model.postcode,
            status=orm_model.status,
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Order) -> OrderORM:
        """Convert domain entity to a new ORM model."""
        return OrderORM(
            id=domain_entity.id.value,
            email=domain_entity.email,
            address=domain_entity.address,
            postcode=domain_entity.postcode,
            status=domain_entity.status,
            created_at=ensure_utc(domain_entity.created_at),
            updated_at=ensure_utc(domain_entity.updated_at or domain_entity.created_at),
        )
