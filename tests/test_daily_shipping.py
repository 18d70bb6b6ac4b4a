"""Tests for the daily shipping batch job."""

import uuid
from collections.abc import Generator
from contextlib import contextmanager
from datetime import UTC, datetime

import pytest
from sqlalchemy.orm import Session

from order_service import models
from order_service.config import Settings
from order_service.domain.ordering.entities import OrderStatus
from order_service.jobs import daily_shipping


@pytest.fixture
def job_session(db_session: Session, monkeypatch: pytest.MonkeyPatch) -> Session:
    """Route the job's session scope to the test session."""

    @contextmanager
    def test_session_scope(settings: Settings | None = None) -> Generator[Session, None, None]:
        yield db_session

    monkeypatch.setattr(daily_shipping, "session_scope", test_session_scope)
    return db_session


def _add_order(db_session: Session, created_at: datetime) -> uuid.UUID:
    order = models.Order(
        id=uuid.uuid4(),
        email="customer@example.com",
        address="123 Teheran-ro",
        postcode="06234",
        status=OrderStatus.PLACED,
        created_at=created_at,
        updated_at=created_at,
    )
    db_session.add(order)
    db_session.commit()
    return order.id


def test_run_daily_shipping_ships_previous_window(job_session: Session) -> None:
    shipped = _add_order(job_session, datetime(2026, 10, 17, 18, 0, tzinfo=UTC))
    too_late = _add_order(job_session, datetime(2026, 10, 18, 14, 5, tzinfo=UTC))
    too_early = _add_order(job_session, datetime(2026, 10, 17, 13, 59, tzinfo=UTC))

    start, end = daily_shipping.run_daily_shipping(
        Settings(SHIPPING_CUTOFF_HOUR=14), now=datetime(2026, 10, 18, 14, 10, tzinfo=UTC)
    )

    assert (start, end) == (
        datetime(2026, 10, 17, 14, 0, tzinfo=UTC),
        datetime(2026, 10, 18, 14, 0, tzinfo=UTC),
    )
    job_session.expire_all()
    assert job_session.get(models.Order, shipped).status == OrderStatus.SHIPPED
    assert job_session.get(models.Order, too_late).status == OrderStatus.PLACED
    assert job_session.get(models.Order, too_early).status == OrderStatus.PLACED


def test_run_daily_shipping_custom_cutoff(job_session: Session) -> None:
    order_id = _add_order(job_session, datetime(2026, 10, 18, 8, 0, tzinfo=UTC))

    daily_shipping.run_daily_shipping(
        Settings(SHIPPING_CUTOFF_HOUR=9), now=datetime(2026, 10, 18, 9, 0, tzinfo=UTC)
    )

    job_session.expire_all()
    assert job_session.get(models.Order, order_id).status == OrderStatus.SHIPPED
