"""Custom exception hierarchy for the order service."""

from collections.abc import Iterable


class OrderServiceError(Exception):
    """Base exception for all order service errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(OrderServiceError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class OrderNotFoundError(NotFoundError):
    """Order not found error."""

    def __init__(self, order_id: object | None = None, *, message: str | None = None) -> None:
        """Initialize with order ID or custom message."""
        self.order_id = order_id
        if message:
            super().__init__(message)
        elif order_id is not None:
            super().__init__(f"Order with id {order_id} not found")
        else:
            super().__init__("Order not found")


class ProductNotFoundError(NotFoundError):
    """One or more referenced products do not exist."""

    def __init__(self, product_ids: Iterable[object]) -> None:
        """Initialize with the product IDs that could not be resolved."""
        self.product_ids = list(product_ids)
        joined = ", ".join(str(product_id) for product_id in self.product_ids)
        if len(self.product_ids) == 1:
            super().__init__(f"Product with id {joined} not found")
        else:
            super().__init__(f"Products with ids {joined} not found")


class ValidationError(OrderServiceError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code=status_code)
