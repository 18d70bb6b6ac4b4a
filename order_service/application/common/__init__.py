"""Application layer building blocks."""

from .unit_of_work import UnitOfWork

__all__ = ["UnitOfWork"]
