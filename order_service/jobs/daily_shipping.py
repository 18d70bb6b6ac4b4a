"""
Daily shipping batch.

Orders placed before the daily cutoff ship that afternoon; anything later
waits for the next day's batch. A cron entry runs this module once a day at
the cutoff:

    0 14 * * * python -m order_service.jobs.daily_shipping
"""

from datetime import UTC, datetime, timedelta

import structlog

from order_service.config import Settings, configure_logging, get_settings
from order_service.core import container
from order_service.database import create_schema, get_engine, get_session_factory, session_scope
from order_service.domain.common.timestamps import ensure_utc
from order_service.infrastructure.common.di import resolve_use_case

logger = structlog.get_logger(__name__)


def shipping_window(now: datetime, cutoff_hour: int) -> tuple[datetime, datetime]:
    """
    Return the 24-hour window ending at the latest cutoff at or before now.

    Args:
        now: Current time; naive values are treated as UTC
        cutoff_hour: Hour of day (0-23, UTC) at which the batch closes

    Returns:
        (start, end) as timezone-aware UTC datetimes, end exclusive
    """
    if not 0 <= cutoff_hour <= 23:
        raise ValueError(f"cutoff_hour must be between 0 and 23, got {cutoff_hour}")

    now = ensure_utc(now)
    end = now.replace(hour=cutoff_hour, minute=0, second=0, microsecond=0)
    if end > now:
        end -= timedelta(days=1)
    return end - timedelta(days=1), end


def run_daily_shipping(
    settings: Settings | None = None, now: datetime | None = None
) -> tuple[datetime, datetime]:
    """Ship every order placed during the window that closed most recently."""
    settings = settings or get_settings()
    start, end = shipping_window(now or datetime.now(UTC), settings.SHIPPING_CUTOFF_HOUR)

    logger.info(
        "daily_shipping_started", window_start=start.isoformat(), window_end=end.isoformat()
    )
    with session_scope(settings) as db:
        use_case = resolve_use_case(container.order_use_case, db)
        use_case.update_order_status(start, end)

    return start, end


def main() -> None:
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)
    get_session_factory(settings)
    create_schema(get_engine())
    run_daily_shipping(settings)


if __name__ == "__main__":
    main()
