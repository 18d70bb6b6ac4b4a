"""Batch product lookup used when building order items."""

from collections.abc import Sequence

import structlog

from order_service.application.catalog.protocols.product_repository import (
    ProductRepositoryProtocol,
)
from order_service.domain.catalog.entities.product import Product
from order_service.domain.common.value_objects import ProductId

logger = structlog.get_logger(__name__)


class ProductLookupService:
    def __init__(self, product_repository: ProductRepositoryProtocol) -> None:
        self.product_repository = product_repository

    def get_by_ids(self, product_ids: Sequence[ProductId]) -> list[Product]:
        """
        Fetch every product matching the given ids in one round trip.

        Ids that do not exist are simply absent from the result; callers
        decide whether that is an error.
        """
        if not product_ids:
            return []

        products = self.product_repository.find_by_ids(product_ids)
        logger.debug(
            "fetched_products",
            requested=len(product_ids),
            found=len(products),
        )
        return products
