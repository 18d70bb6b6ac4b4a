"""Protocol for Product repository."""

from collections.abc import Sequence
from typing import Protocol

from order_service.domain.catalog.entities.product import Product
from order_service.domain.common.value_objects import ProductId


class ProductRepositoryProtocol(Protocol):
    """Interface for Product persistence."""

    def find_by_id(self, product_id: ProductId) -> Product | None: ...

    def find_by_ids(self, product_ids: Sequence[ProductId]) -> list[Product]: ...

    def find_all(self) -> list[Product]: ...

    def save(self, product: Product) -> Product: ...
