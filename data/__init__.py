"""Public data models and API clients for the Finnhub client library."""

from data.base import (
    DataSource,
    DataSourceError,
    DecodeError,
    InvalidUrlError,
    RateLimitReachedError,
    TransportError,
)
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

__all__ = [
    "DataSource",
    "DataSourceError",
    "InvalidUrlError",
    "TransportError",
    "DecodeError",
    "RateLimitReachedError",
    "BasicFinancials",
    "Candle",
    "CompanyNews",
    "CompanyProfile",
    "CompanyQuote",
    "ForexRates",
    "ForexSymbol",
    "MarketNews",
    "MarketNewsCategory",
    "NewsSentiment",
    "ProfileToParam",
    "Resolution",
    "StockSymbol",
    "SymbolLookup",
]
