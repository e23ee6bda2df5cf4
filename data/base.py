from abc import ABC, abstractmethod
from typing import Any


class DataSource(ABC):
    """Abstract base class for remote data API clients."""

    def __init__(self, source_name: str) -> None:
        """Validate and store a human-readable provider name."""
        if source_name is None:
            raise ValueError("source_name cannot be None")
        if not isinstance(source_name, str):
            raise TypeError(f"source_name must be a string, got {type(source_name).__name__}")
        if not source_name.strip():
            raise ValueError("source_name cannot be empty or whitespace only")

        self.source_name = source_name.strip()

    @abstractmethod
    async def validate_connection(self) -> bool:
        """Test whether the remote service is reachable and credentials work."""


class DataSourceError(Exception):
    """Base exception for data source related errors."""

    pass


class InvalidUrlError(DataSourceError):
    """Rendered request URL could not be parsed. Raised before any network call."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class TransportError(DataSourceError):
    """The network call itself failed (DNS, connection, timeout)."""

    pass


class DecodeError(DataSourceError):
    """HTTP call completed but the body did not match the expected shape."""

    def __init__(self, message: str, *, status_code: int, body: bytes) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @property
    def body_preview(self) -> str:
        return self.body[:300].decode("utf-8", errors="replace")


class RateLimitReachedError(DataSourceError):
    """Raised when a caller asks for the payload of a rate-limited outcome."""

    def __init__(self, outcome: Any) -> None:
        super().__init__("Rate limit reached (status 429)")
        self.outcome = outcome
