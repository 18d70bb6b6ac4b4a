"""Mapper for Product ORM ↔ Domain conversion."""

from order_service.domain.catalog.entities.product import Product
from order_service.domain.common.timestamps import ensure_utc
from order_service.domain.common.value_objects import ProductId
from order_service.models import Product as ProductORM


class ProductMapper:
    """Mapper for Product ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ProductORM) -> Product:
        """Convert ORM model to domain entity."""
        return Product.create_with_id(
            id=ProductId(orm_model.id),
            name=orm_model.name,
            category=orm_model.category,
            price=orm_model.price,
            description=orm_model.description,
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Product, orm_model: ProductORM | None = None) -> ProductORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.category = domain_entity.category
            orm_model.price = domain_entity.price
            orm_model.description = domain_entity.description
            return orm_model

        return ProductORM(
            id=domain_entity.id.value,
            name=domain_entity.name,
            category=domain_entity.category,
            price=domain_entity.price,
            description=domain_entity.description,
        )
