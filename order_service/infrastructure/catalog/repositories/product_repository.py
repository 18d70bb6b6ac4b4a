"""Repository for Product domain entities."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from order_service.domain.catalog.entities.product import Product
from order_service.domain.common.value_objects import ProductId
from order_service.infrastructure.catalog.mappers.product_mapper import ProductMapper
from order_service.models import Product as ProductORM


class ProductRepository:
    """Repository for Product domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ProductMapper()

    def find_by_id(self, product_id: ProductId) -> Product | None:
        stmt = select(ProductORM).where(ProductORM.id == product_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_ids(self, product_ids: Sequence[ProductId]) -> list[Product]:
        """
        Get all products whose id is in the given set.

        Args:
            product_ids: Product IDs to look up

        Returns:
            Matching products in no particular order; unknown ids are skipped
        """
        if not product_ids:
            return []

        stmt = select(ProductORM).where(ProductORM.id.in_([pid.value for pid in product_ids]))
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_all(self) -> list[Product]:
        stmt = select(ProductORM).order_by(ProductORM.category, ProductORM.name)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, product: Product) -> Product:
        """Persist a product, inserting it if it is new."""
        existing_orm = self.db.get(ProductORM, product.id.value)
        if existing_orm is None:
            orm_model = self.mapper.to_orm(product)
            self.db.add(orm_model)
            self.db.flush()
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)

        self.mapper.to_orm(product, existing_orm)
        self.db.flush()
        return self.mapper.to_domain(existing_orm)
