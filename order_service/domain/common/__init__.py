"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
"""

from .entity import Entity, EntityId, UUIDEntityId
from .exceptions import (
    DomainError,
    InvariantViolationError,
    ValidationError,
)
from .timestamps import ensure_utc
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "InvariantViolationError",
    "UUIDEntityId",
    "ValidationError",
    "ValueObject",
    "ensure_utc",
]
