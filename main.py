"""Command-line entry point for one-off Finnhub requests.

Examples:
    python main.py quote AAPL
    python main.py candles AAPL --resolution D --days 30
"""

import argparse
import asyncio
import logging
import sys
import time
from typing import Any

from dotenv import load_dotenv
from pydantic import TypeAdapter

from config.providers.finnhub import FinnhubSettings
from data import DataSourceError, ProfileToParam, Resolution
from data.providers.finnhub import ApiResponse, FinnhubClient
from utils.logging import setup_logging
from utils.replay import scrub_url

logger = logging.getLogger(__name__)

_ANY = TypeAdapter(Any)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the Finnhub REST API")
    sub = parser.add_subparsers(dest="command", required=True)

    for name in ("quote", "profile", "peers", "sentiment"):
        cmd = sub.add_parser(name)
        cmd.add_argument("symbol")

    candles = sub.add_parser("candles")
    candles.add_argument("symbol")
    candles.add_argument(
        "--resolution",
        default=Resolution.DAY.value,
        choices=[r.value for r in Resolution],
    )
    candles.add_argument("--days", type=int, default=30)

    rates = sub.add_parser("forex-rates")
    rates.add_argument("base")

    return parser


async def dispatch(client: FinnhubClient, args: argparse.Namespace) -> tuple[ApiResponse[Any], str]:
    """Map a parsed command onto the matching client method."""
    match args.command:
        case "quote":
            return await client.quote(args.symbol)
        case "profile":
            return await client.company_profile2(ProfileToParam.SYMBOL, args.symbol)
        case "peers":
            return await client.peers(args.symbol)
        case "sentiment":
            return await client.news_sentiment(args.symbol)
        case "candles":
            to_ts = int(time.time())
            from_ts = to_ts - args.days * 86400
            return await client.stock_candles(
                args.symbol, from_ts, to_ts, Resolution(args.resolution)
            )
        case "forex-rates":
            return await client.forex_rates(args.base)
    raise ValueError(f"Unknown command: {args.command}")


async def run(client: FinnhubClient, args: argparse.Namespace) -> int:
    try:
        outcome, url = await dispatch(client, args)
    except DataSourceError as exc:
        logger.error("Request failed: %s", exc)
        return 1

    print(scrub_url(url))
    if outcome.is_rate_limit_reached():
        logger.warning("Rate limit reached, try again later")
        return 2

    print(_ANY.dump_json(outcome.as_response(), indent=2).decode("utf-8"))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    load_dotenv(override=True)
    setup_logging()

    try:
        settings = FinnhubSettings.from_env()
    except ValueError as exc:
        logger.error("%s", exc)
        return 1

    return asyncio.run(run(FinnhubClient(settings), args))


if __name__ == "__main__":
    sys.exit(main())
