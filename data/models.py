"""Finnhub response schemas and request parameter enums.

Schemas are pydantic models keyed by the provider's JSON field names (via
aliases). They carry no behavior and are only used as decode targets.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Resolution(Enum):
    """Candle resolution codes accepted by /stock/candle."""

    MINUTE = "1"
    FIVE_MINUTES = "5"
    FIFTEEN_MINUTES = "15"
    THIRTY_MINUTES = "30"
    HOUR = "60"
    DAY = "D"
    WEEK = "W"
    MONTH = "M"


class MarketNewsCategory(Enum):
    GENERAL = "general"
    FOREX = "forex"
    CRYPTO = "crypto"
    MERGER = "merger"


class ProfileToParam(Enum):
    """Which identifier /stock/profile2 should look the company up by."""

    SYMBOL = "symbol"
    ISIN = "isin"
    CUSIP = "cusip"


class FinnhubModel(BaseModel):
    """Common config: accept JSON aliases or field names, keep unknown keys out."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# --- Symbols ---


class SymbolLookupInfo(FinnhubModel):
    description: str
    display_symbol: str = Field(..., alias="displaySymbol")
    symbol: str
    type: str


class SymbolLookup(FinnhubModel):
    """Result of /search."""

    count: int
    result: list[SymbolLookupInfo]


class StockSymbol(FinnhubModel):
    currency: str | None = None
    description: str
    display_symbol: str = Field(..., alias="displaySymbol")
    figi: str | None = None
    mic: str | None = None
    symbol: str
    type: str | None = None


# --- Company ---


class CompanyProfile(FinnhubModel):
    """Result of /stock/profile2. Finnhub returns {} for unknown companies."""

    country: str | None = None
    currency: str | None = None
    exchange: str | None = None
    industry: str | None = Field(None, alias="finnhubIndustry")
    ipo: str | None = None
    logo: str | None = None
    market_capitalization: float | None = Field(None, alias="marketCapitalization")
    name: str | None = None
    phone: str | None = None
    share_outstanding: float | None = Field(None, alias="shareOutstanding")
    ticker: str | None = None
    weburl: str | None = None


class CompanyQuote(FinnhubModel):
    """Result of /quote."""

    current: float = Field(..., alias="c", description="Current price")
    high: float = Field(..., alias="h", description="High price of the day")
    low: float = Field(..., alias="l", description="Low price of the day")
    open: float = Field(..., alias="o", description="Open price of the day")
    previous_close: float | None = Field(None, alias="pc")
    change: float | None = Field(None, alias="d")
    percent_change: float | None = Field(None, alias="dp")
    timestamp: int | None = Field(None, alias="t", description="UNIX seconds")


class BasicFinancials(FinnhubModel):
    """Result of /stock/metric with metric=all."""

    symbol: str
    metric_type: str | None = Field(None, alias="metricType")
    metric: dict[str, float | str | None] = Field(default_factory=dict)
    series: dict[str, Any] = Field(default_factory=dict)


# --- News ---


class MarketNews(FinnhubModel):
    category: str
    datetime: int = Field(..., description="Published time, UNIX seconds")
    headline: str
    id: int
    image: str | None = None
    related: str | None = None
    source: str
    summary: str | None = None
    url: str


class CompanyNews(MarketNews):
    """Same shape as market news, scoped to one symbol."""


class NewsBuzz(FinnhubModel):
    articles_in_last_week: int = Field(..., alias="articlesInLastWeek")
    buzz: float
    weekly_average: float = Field(..., alias="weeklyAverage")


class NewsSentimentScore(FinnhubModel):
    bearish_percent: float = Field(..., alias="bearishPercent")
    bullish_percent: float = Field(..., alias="bullishPercent")


class NewsSentiment(FinnhubModel):
    buzz: NewsBuzz
    company_news_score: float = Field(..., alias="companyNewsScore")
    sector_average_bullish_percent: float = Field(..., alias="sectorAverageBullishPercent")
    sector_average_news_score: float = Field(..., alias="sectorAverageNewsScore")
    sentiment: NewsSentimentScore
    symbol: str


# --- Forex ---


class ForexRates(FinnhubModel):
    base: str
    quote: dict[str, float]


class ForexSymbol(FinnhubModel):
    description: str
    display_symbol: str = Field(..., alias="displaySymbol")
    symbol: str


# --- Candles ---


class Candle(FinnhubModel):
    """OHLCV arrays from /stock/candle. Arrays are absent when status is "no_data"."""

    status: str = Field(..., alias="s")
    close: list[float] = Field(default_factory=list, alias="c")
    high: list[float] = Field(default_factory=list, alias="h")
    low: list[float] = Field(default_factory=list, alias="l")
    open: list[float] = Field(default_factory=list, alias="o")
    volume: list[float] = Field(default_factory=list, alias="v")
    timestamps: list[int] = Field(default_factory=list, alias="t")
