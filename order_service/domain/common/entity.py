"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap an integer or UUID.
    They provide type safety to prevent mixing up IDs of different entities.

    Example:
        @dataclass(frozen=True)
        class OrderId(EntityId):
            value: UUID

        order_id = OrderId.generate()
        product_id = ProductId(order_id.value)
        # Different types, never equal
    """

    value: int | UUID

    def __post_init__(self) -> None:
        if isinstance(self.value, int) and self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. Usually these are set by the database"""
        return cls(0)


@dataclass(frozen=True)
class UUIDEntityId(EntityId):
    """Entity identifier generated by the application rather than the database."""

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{self.__class__.__name__} must wrap a UUID")

    @classmethod
    def generate(cls) -> Self:
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str | UUID) -> Self:
        """Build an identifier from a UUID or its string form."""
        if isinstance(raw, UUID):
            return cls(raw)
        try:
            return cls(UUID(raw))
        except ValueError as e:
            raise ValueError(f"Invalid {cls.__name__}: {raw!r}") from e


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
