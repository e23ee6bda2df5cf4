"""Finnhub provider package."""

from data.providers.finnhub.finnhub_client import FinnhubClient, maybe_add
from data.providers.finnhub.response import ApiResponse, RateLimitReached, Response
from data.providers.finnhub.url_builder import UrlBuilder

__all__ = [
    "ApiResponse",
    "FinnhubClient",
    "RateLimitReached",
    "Response",
    "UrlBuilder",
    "maybe_add",
]
