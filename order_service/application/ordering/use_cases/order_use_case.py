"""Use case for placing, reading, deleting and shipping orders."""

from datetime import datetime
from uuid import UUID

import structlog

from order_service.application.catalog.services.product_lookup_service import (
    ProductLookupService,
)
from order_service.application.common.unit_of_work import UnitOfWork
from order_service.application.ordering.protocols.order_repository import (
    OrderRepositoryProtocol,
)
from order_service.application.ordering.services.order_item_service import OrderItemService
from order_service.domain.catalog.entities.product import Product
from order_service.domain.common.timestamps import ensure_utc
from order_service.domain.common.value_objects import OrderId, ProductId
from order_service.domain.ordering.entities import Order, OrderItem, OrderStatus
from order_service.exceptions import OrderNotFoundError, ProductNotFoundError, ValidationError
from order_service.schemas.order_schemas import (
    CreateOrderRequest,
    OrderItemResponse,
    OrderResponse,
)

logger = structlog.get_logger(__name__)


class OrderUseCase:
    def __init__(
        self,
        order_repository: OrderRepositoryProtocol,
        product_lookup_service: ProductLookupService,
        order_item_service: OrderItemService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.order_repository = order_repository
        self.product_lookup_service = product_lookup_service
        self.order_item_service = order_item_service
        self.unit_of_work = unit_of_work

    def create_order(self, request: CreateOrderRequest) -> OrderResponse:
        """
        Place an order and its items as one atomic unit of work.

        The order header is saved first so its id exists for the items. All
        referenced products are fetched in one batch; any id missing from the
        catalog aborts the whole operation.

        Args:
            request: Customer details and the requested lines

        Returns:
            The placed order with one response item per requested line, in
            request order

        Raises:
            ProductNotFoundError: If any requested product does not exist
        """
        with self.unit_of_work:
            order = Order.create(
                email=request.email,
                address=request.address,
                postcode=request.postcode,
            )
            order = self.order_repository.save(order)

            product_ids = self._extract_product_ids(request)
            product_map = self._get_products(product_ids)
            order_items = self._build_order_items(request, product_map, order)
            order_items = self.order_item_service.create_batch(order_items)
            item_responses = self._to_item_responses(order_items)

            self.unit_of_work.commit()

        logger.info(
            "created_order",
            order_id=str(order.id),
            item_count=len(order_items),
            product_count=len(product_ids),
        )
        return OrderResponse.of(order, item_responses)

    @staticmethod
    def _extract_product_ids(request: CreateOrderRequest) -> list[ProductId]:
        # Distinct ids in first-seen order
        unique = dict.fromkeys(item.product_id for item in request.items)
        return [ProductId(product_id) for product_id in unique]

    def _get_products(self, product_ids: list[ProductId]) -> dict[ProductId, Product]:
        products = self.product_lookup_service.get_by_ids(product_ids)
        product_map = {product.id: product for product in products}

        missing = [product_id for product_id in product_ids if product_id not in product_map]
        if missing:
            raise ProductNotFoundError(product_id.value for product_id in missing)

        return product_map

    @staticmethod
    def _build_order_items(
        request: CreateOrderRequest,
        product_map: dict[ProductId, Product],
        order: Order,
    ) -> list[OrderItem]:
        return [
            OrderItem.create(
                order=order,
                product=product_map[ProductId(line.product_id)],
                quantity=line.quantity,
            )
            for line in request.items
        ]

    @staticmethod
    def _to_item_responses(order_items: list[OrderItem]) -> list[OrderItemResponse]:
        return [OrderItemResponse.from_domain(item) for item in order_items]

    def get_order(self, order_id: UUID) -> OrderResponse:
        """
        Get a single order with its items.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        order = self.find_order_by_id(order_id)
        order_items = self.order_item_service.get_for_order(order.id)
        return OrderResponse.of(order, self._to_item_responses(order_items))

    def find_order_by_id(self, order_id: UUID) -> Order:
        """
        Load an order by its identifier.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        order = self.order_repository.find_by_id(OrderId(order_id))
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def delete_order(self, order_id: UUID) -> None:
        """
        Delete an order.

        Removing the order's items is left to the storage layer.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        with self.unit_of_work:
            order = self.find_order_by_id(order_id)
            self.order_repository.delete_by_id(order.id)
            self.unit_of_work.commit()

        logger.info("deleted_order", order_id=str(order_id))

    def update_order_status(self, window_start: datetime, window_end: datetime) -> None:
        """
        Mark every order placed in [window_start, window_end) as shipped.

        Orders that are already shipped are left untouched, so running this
        again over the same window changes nothing. Bounds in any timezone are
        compared as UTC instants; naive bounds are taken as UTC.

        Raises:
            ValidationError: If the window is empty or reversed
        """
        window_start = ensure_utc(window_start)
        window_end = ensure_utc(window_end)
        if window_start >= window_end:
            raise ValidationError(
                f"Shipping window start {window_start.isoformat()} must be before "
                f"end {window_end.isoformat()}"
            )

        with self.unit_of_work:
            shipped = self.order_repository.update_status_in_range(
                OrderStatus.SHIPPED, window_start, window_end
            )
            self.unit_of_work.commit()

        logger.info(
            "shipped_orders",
            window_start=window_start.isoformat(),
            window_end=window_end.isoformat(),
            count=shipped,
        )
