from typing import TypeVar

from dependency_injector.providers import Provider
from sqlalchemy.orm import Session

from order_service.core import container

T = TypeVar("T")


def resolve_use_case(provider: Provider[T], db: Session) -> T:
    """
    Build a use case from a container provider against the given session.

    Overrides container.db only while the object graph is constructed, so
    every repository and the unit of work share this one session.
    """
    try:
        container.db.override(db)
        return provider()
    finally:
        container.db.reset_override()
