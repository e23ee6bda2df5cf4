"""Outcome of a single Finnhub API call: a decoded payload or a rate-limit signal."""

from dataclasses import dataclass

from data.base import RateLimitReachedError


class ApiResponse[T]:
    """Base of the two outcome cases, with narrowing helpers.

    Callers must branch on the case before trusting the payload.
    """

    def is_response(self) -> bool:
        return isinstance(self, Response)

    def is_rate_limit_reached(self) -> bool:
        return isinstance(self, RateLimitReached)

    def as_response(self) -> T | None:
        """Return the payload for a ``Response``, otherwise ``None``."""
        if isinstance(self, Response):
            return self.value
        return None

    def try_into_response(self) -> T:
        """Return the payload, or raise ``RateLimitReachedError`` carrying this outcome."""
        if isinstance(self, Response):
            return self.value
        raise RateLimitReachedError(self)


@dataclass(frozen=True)
class Response[T](ApiResponse[T]):
    value: T


@dataclass(frozen=True)
class RateLimitReached(ApiResponse):
    """Provider rejected the call with HTTP 429."""
