from dataclasses import dataclass
from uuid import UUID

from ..entity import EntityId, UUIDEntityId


@dataclass(frozen=True)
class OrderId(UUIDEntityId):
    """Strongly-typed order identifier."""

    value: UUID


@dataclass(frozen=True)
class ProductId(UUIDEntityId):
    """Strongly-typed product identifier."""

    value: UUID


@dataclass(frozen=True)
class OrderItemId(EntityId):
    """Strongly-typed order item identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("OrderItemId must be non-negative")

    @classmethod
    def generate(cls) -> "OrderItemId":
        return cls(0)  # Database assigns real ID
