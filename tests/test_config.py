"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from order_service.config import Settings


def test_default_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SHIPPING_CUTOFF_HOUR", raising=False)
    settings = Settings(_env_file=None)

    assert settings.SHIPPING_CUTOFF_HOUR == 14
    assert settings.ENVIRONMENT in {"development", "production", "test"}


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHIPPING_CUTOFF_HOUR", "9")
    monkeypatch.setenv("DATABASE_URL", "  sqlite:///./test.db ")

    settings = Settings(_env_file=None)

    assert settings.SHIPPING_CUTOFF_HOUR == 9
    assert settings.DATABASE_URL == "sqlite:///./test.db"


@pytest.mark.parametrize("hour", [-1, 24])
def test_invalid_cutoff_hour(hour: int) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, SHIPPING_CUTOFF_HOUR=hour)
