"""Public provider facades."""

from data.providers import finnhub

__all__ = ["finnhub"]
