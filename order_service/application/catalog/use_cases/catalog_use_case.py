"""Use case for managing catalog products."""

from uuid import UUID

import structlog

from order_service.application.catalog.protocols.product_repository import (
    ProductRepositoryProtocol,
)
from order_service.application.common.unit_of_work import UnitOfWork
from order_service.domain.catalog.entities.product import Product
from order_service.domain.common.value_objects import ProductId
from order_service.exceptions import ProductNotFoundError
from order_service.schemas.product_schemas import ProductCreateRequest, ProductResponse

logger = structlog.get_logger(__name__)


class CatalogUseCase:
    def __init__(
        self,
        product_repository: ProductRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.product_repository = product_repository
        self.unit_of_work = unit_of_work

    def register_product(self, request: ProductCreateRequest) -> ProductResponse:
        """Add a product to the catalog."""
        with self.unit_of_work:
            product = Product.create(
                name=request.name,
                category=request.category,
                price=request.price,
                description=request.description,
            )
            product = self.product_repository.save(product)
            self.unit_of_work.commit()

        logger.info(
            "registered_product",
            product_id=str(product.id),
            category=product.category,
            price=product.price,
        )
        return ProductResponse.from_domain(product)

    def get_product(self, product_id: UUID) -> ProductResponse:
        """
        Get a single product.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        product = self.product_repository.find_by_id(ProductId(product_id))
        if product is None:
            raise ProductNotFoundError([product_id])
        return ProductResponse.from_domain(product)

    def list_products(self) -> list[ProductResponse]:
        return [ProductResponse.from_domain(p) for p in self.product_repository.find_all()]
