"""Finnhub provider configuration settings."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://finnhub.io/api/v1"


@dataclass(frozen=True)
class FinnhubSettings:
    """Configuration settings for Finnhub API integration"""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0

    def __post_init__(self) -> None:
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")

    def __repr__(self) -> str:
        return (
            f"FinnhubSettings(api_key='***', base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> "FinnhubSettings":
        """Load Finnhub settings from environment variables.

        Reads ``FINNHUB_API_KEY`` (required) and ``FINNHUB_BASE_URL`` (optional).
        """
        if env is None:
            env = os.environ
        key = (env.get("FINNHUB_API_KEY") or "").strip()
        if not key:
            raise ValueError("FINNHUB_API_KEY environment variable not found or empty")
        base_url = (env.get("FINNHUB_BASE_URL") or "").strip() or DEFAULT_BASE_URL
        return FinnhubSettings(api_key=key, base_url=base_url)
