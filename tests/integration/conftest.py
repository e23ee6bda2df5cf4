"""Shared pytest configuration for integration tests."""

import pytest

from config.providers.finnhub import FinnhubSettings

pytestmark = pytest.mark.integration


@pytest.fixture
def finnhub_settings() -> FinnhubSettings:
    try:
        return FinnhubSettings.from_env()
    except ValueError as exc:
        pytest.skip(f"FINNHUB settings unavailable: {exc}")
