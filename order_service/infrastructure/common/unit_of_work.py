"""SQLAlchemy implementation of the Unit of Work port."""

import structlog
from sqlalchemy.orm import Session

from order_service.application.common.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of Work bound to a request-scoped SQLAlchemy session.

    Repositories sharing the session only flush; this object owns the
    transaction boundary.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        logger.warning("rolling_back_unit_of_work")
        self.db.rollback()
