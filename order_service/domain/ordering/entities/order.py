"""Order entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

from order_service.domain.common.entity import Entity
from order_service.domain.common.exceptions import ValidationError
from order_service.domain.common.value_objects.ids import OrderId


class OrderStatus(str, Enum):
    """Lifecycle states of an order."""

    PLACED = "PLACED"
    SHIPPED = "SHIPPED"


@dataclass
class Order(Entity[OrderId]):
    """
    Order header placed by a customer.

    Business Rules:
    - Every order starts out PLACED
    - Orders become SHIPPED only through the daily shipping batch
    - Email, address and postcode are required
    """

    id: OrderId
    email: str
    address: str
    postcode: str
    status: OrderStatus = OrderStatus.PLACED
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        for name in ("email", "address", "postcode"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValidationError(f"Order {name} cannot be empty", field=name)

    @classmethod
    def create(cls, email: str, address: str, postcode: str) -> "Order":
        """
        Place a new order.

        The identifier is generated here so that order items can reference
        the order before anything is persisted.
        """
        return cls(
            id=OrderId.generate(),
            email=email.strip(),
            address=address.strip(),
            postcode=postcode.strip(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: OrderId,
        email: str,
        address: str,
        postcode: str,
        status: OrderStatus,
        created_at: datetime,
        updated_at: datetime | None,
    ) -> "Order":
        """Reconstitute an order from persistence."""
        return cls(
            id=id,
            email=email,
            address=address,
            postcode=postcode,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )
