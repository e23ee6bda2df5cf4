"""Finnhub API client: request dispatch plus one method per endpoint."""

import logging
from collections.abc import Sequence
from enum import Enum
from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from config.providers.finnhub import FinnhubSettings
from data.base import DataSource, DataSourceError, DecodeError, InvalidUrlError
from data.models import (
    BasicFinancials,
    Candle,
    CompanyNews,
    CompanyProfile,
    CompanyQuote,
    ForexRates,
    ForexSymbol,
    MarketNews,
    MarketNewsCategory,
    NewsSentiment,
    ProfileToParam,
    Resolution,
    StockSymbol,
    SymbolLookup,
)
from data.providers.finnhub.response import ApiResponse, RateLimitReached, Response
from data.providers.finnhub.url_builder import UrlBuilder
from utils.http import HttpxTransport, Transport

logger = logging.getLogger(__name__)

TOKEN_PARAM = "token"
HTTP_TOO_MANY_REQUESTS = 429

type Params = list[tuple[str, str]]


def _param_text(value: Any) -> str:
    """Canonical textual form of a query value (enums render their code)."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def maybe_add(params: Params, name: str, value: Any | None) -> None:
    """Append ``(name, value)`` only when a value was supplied."""
    if value is not None:
        params.append((name, _param_text(value)))


@lru_cache(maxsize=128)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


class FinnhubClient(DataSource):
    """Async Finnhub API client.

    Stateless apart from its settings: safe to share across concurrent tasks.
    The network step goes through ``transport``, so tests can swap in a
    replay transport without touching the dispatch logic.
    """

    def __init__(
        self,
        settings: FinnhubSettings,
        transport: Transport | None = None,
        source_name: str = "Finnhub",
    ) -> None:
        super().__init__(source_name)
        self.settings = settings
        self.url_builder = UrlBuilder(settings.base_url)
        self.transport = (
            transport if transport is not None else HttpxTransport(timeout=settings.timeout_seconds)
        )

    async def get[T](
        self,
        endpoint: str,
        params: Sequence[tuple[str, str]],
        response_type: type[T],
    ) -> tuple[ApiResponse[T], str]:
        """Compose the URL, make the request and decode the body into ``response_type``.

        Returns the outcome together with the exact URL handed to the transport,
        in the normalised form httpx sends on the wire.

        Raises:
            InvalidUrlError: the rendered URL does not parse (no request is made).
            TransportError: the network call failed.
            DecodeError: the body is not JSON of the expected shape.
        """
        # Token goes last, after every caller param
        query: Params = [*params, (TOKEN_PARAM, self.settings.api_key)]
        url = self._validate_url(self.url_builder.url(endpoint, query))

        logger.debug("GET %s (%d params)", endpoint, len(params))
        response = await self.transport.get(url)

        if response.status_code == HTTP_TOO_MANY_REQUESTS:
            logger.warning("Finnhub rate limit reached on %s", endpoint)
            return RateLimitReached(), url

        try:
            value = _adapter(response_type).validate_json(response.body)
        except ValidationError as exc:
            raise DecodeError(
                f"Unexpected response from {endpoint} (status {response.status_code}): "
                f"{exc.error_count()} validation error(s)",
                status_code=response.status_code,
                body=response.body,
            ) from exc

        return Response(value), url

    def _validate_url(self, url: str) -> str:
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as exc:
            raise InvalidUrlError(f"Invalid request URL: {exc}", url) from exc
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise InvalidUrlError("Request URL must be absolute http(s)", url)
        return str(parsed)

    async def validate_connection(self) -> bool:
        """Validate API connection using a simple quote request."""
        try:
            outcome, _ = await self.quote("SPY")
        except DataSourceError as exc:
            logger.warning("FinnhubClient connection validation failed: %s", exc)
            return False
        if outcome.is_rate_limit_reached():
            logger.warning("FinnhubClient connection validation hit the rate limit")
            return False
        return True

    # ---------------- Endpoints ----------------

    async def symbol_lookup(self, query: str) -> tuple[ApiResponse[SymbolLookup], str]:
        """Search for best-matching symbols. https://finnhub.io/docs/api/symbol-search"""
        return await self.get("search", [("q", query)], SymbolLookup)

    async def stock_symbol(
        self,
        exchange: str,
        mic: str | None = None,
        security_type: str | None = None,
        currency: str | None = None,
    ) -> tuple[ApiResponse[list[StockSymbol]], str]:
        """List supported stocks on an exchange. https://finnhub.io/docs/api/stock-symbols"""
        params: Params = [("exchange", exchange)]
        maybe_add(params, "mic", mic)
        maybe_add(params, "security_type", security_type)
        maybe_add(params, "currency", currency)
        return await self.get("stock/symbol", params, list[StockSymbol])

    async def company_profile2(
        self, key: ProfileToParam, value: str
    ) -> tuple[ApiResponse[CompanyProfile], str]:
        """Company profile by symbol, ISIN or CUSIP. https://finnhub.io/docs/api/company-profile2"""
        return await self.get("stock/profile2", [(_param_text(key), value)], CompanyProfile)

    async def market_news(
        self, category: MarketNewsCategory, min_id: int | None = None
    ) -> tuple[ApiResponse[list[MarketNews]], str]:
        """Latest market news in a category. https://finnhub.io/docs/api/market-news"""
        params: Params = [("category", _param_text(category))]
        maybe_add(params, "minId", min_id)
        return await self.get("news", params, list[MarketNews])

    async def company_news(
        self, symbol: str, from_date: str, to_date: str
    ) -> tuple[ApiResponse[list[CompanyNews]], str]:
        """Company news between two YYYY-MM-DD dates. https://finnhub.io/docs/api/company-news"""
        params: Params = [("symbol", symbol), ("from", from_date), ("to", to_date)]
        return await self.get("company-news", params, list[CompanyNews])

    async def news_sentiment(self, symbol: str) -> tuple[ApiResponse[NewsSentiment], str]:
        """https://finnhub.io/docs/api/news-sentiment"""
        return await self.get("news-sentiment", [("symbol", symbol)], NewsSentiment)

    async def peers(self, symbol: str) -> tuple[ApiResponse[list[str]], str]:
        """https://finnhub.io/docs/api/company-peers"""
        return await self.get("stock/peers", [("symbol", symbol)], list[str])

    async def quote(self, symbol: str) -> tuple[ApiResponse[CompanyQuote], str]:
        """https://finnhub.io/docs/api/quote"""
        return await self.get("quote", [("symbol", symbol)], CompanyQuote)

    async def basic_financials(self, symbol: str) -> tuple[ApiResponse[BasicFinancials], str]:
        """https://finnhub.io/docs/api/company-basic-financials"""
        return await self.get(
            "stock/metric", [("symbol", symbol), ("metric", "all")], BasicFinancials
        )

    async def forex_rates(self, base: str) -> tuple[ApiResponse[ForexRates], str]:
        """Rates for all forex pairs against ``base``."""
        return await self.get("forex/rates", [("base", base)], ForexRates)

    async def forex_exchanges(self) -> tuple[ApiResponse[list[str]], str]:
        return await self.get("forex/exchange", [], list[str])

    async def forex_symbol(self, exchange: str) -> tuple[ApiResponse[list[ForexSymbol]], str]:
        return await self.get("forex/symbol", [("exchange", exchange)], list[ForexSymbol])

    async def stock_candles(
        self, symbol: str, from_ts: int, to_ts: int, resolution: Resolution
    ) -> tuple[ApiResponse[Candle], str]:
        """OHLCV candles between two UNIX timestamps."""
        params: Params = [
            ("symbol", symbol),
            ("resolution", _param_text(resolution)),
            ("from", str(from_ts)),
            ("to", str(to_ts)),
        ]
        return await self.get("stock/candle", params, Candle)
