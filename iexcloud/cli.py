"""
Command-line access to the IEX Cloud API.

Usage:
    iexcloud quote AAPL
    iexcloud historical AAPL 3m --close-only
    iexcloud --env-file ~/.iex.env usage

The token comes from --token, IEX_TOKEN, or a .env file.
"""

import argparse
import datetime
import logging
import sys
from typing import Dict, List, Optional

from dotenv import find_dotenv, load_dotenv

from iexcloud.client import IEXCloudClient, ProviderError
from iexcloud.codecs import DecodeError, encode
from iexcloud.config import settings
from iexcloud.enums import HistoricalTimeFrame, PathRange
from iexcloud.models import (
    Company, DEEP, DEEPBook, Dividend, Earnings, HistoricalDataPoint,
    HistoricalOptions, IntradayPrice, IntradayStats, KeyStats, News, Quote,
    Sector, Status, Symbol, Tag, Trade, Usage,
)
from iexcloud.utils import log

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------
# Each returns (title, result, result type). The type drives JSON encoding.

def _status(client, args):
    return "Status", client.status(), Status


def _quote(client, args):
    return f"Quote {args.symbol}", client.quote(args.symbol), Quote


def _company(client, args):
    return f"Company {args.symbol}", client.company(args.symbol), Company


def _stats(client, args):
    return f"Key Stats {args.symbol}", client.key_stats(args.symbol), KeyStats


def _earnings(client, args):
    return f"Earnings {args.symbol}", client.earnings(args.symbol, args.last), Earnings


def _dividends(client, args):
    result = client.dividends(args.symbol, args.range)
    return f"Dividends {args.symbol}", result, List[Dividend]


def _intraday(client, args):
    return f"Intraday Prices {args.symbol}", client.intraday_prices(args.symbol), List[IntradayPrice]


def _historical(client, args):
    options = HistoricalOptions(
        chart_close_only=args.close_only,
        chart_interval=args.interval,
        chart_last=args.last,
    )
    if args.date:
        day = datetime.datetime.strptime(args.date, "%Y%m%d").date()
        result = client.historical_prices_by_day(args.symbol, day, options)
        return f"Historical Prices {args.symbol} {args.date}", result, List[HistoricalDataPoint]
    result = client.historical_prices(args.symbol, args.timeframe, options)
    return f"Historical Prices {args.symbol} {args.timeframe}", result, List[HistoricalDataPoint]


def _symbols(client, args):
    return "Symbols", client.symbols(), List[Symbol]


def _sectors(client, args):
    return "Sectors", client.sectors(), List[Sector]


def _tags(client, args):
    return "Tags", client.tags(), List[Tag]


def _peers(client, args):
    return f"Peers {args.symbol}", client.peers(args.symbol), List[str]


def _news(client, args):
    return f"News {args.symbol}", client.news(args.symbol, args.last), List[News]


def _most_active(client, args):
    return "Most Active", client.most_active(), List[Quote]


def _usage(client, args):
    return "Usage", client.usage(), Usage


def _deep(client, args):
    return f"DEEP {args.symbol}", client.deep(args.symbol), DEEP


def _deep_book(client, args):
    return f"DEEP Book {args.symbol}", client.deep_book([args.symbol]), Dict[str, DEEPBook]


def _deep_trades(client, args):
    result = client.deep_trades([args.symbol])
    return f"DEEP Trades {args.symbol}", result, Dict[str, List[Trade]]


def _intraday_stats(client, args):
    return "IEX Intraday Stats", client.intraday_stats(), IntradayStats


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iexcloud", description="Retrieve data from the IEX Cloud API"
    )
    parser.add_argument("--token", type=str, help="API token (default: IEX_TOKEN)")
    parser.add_argument("--base-url", type=str, help="API root URL (default: IEX_BASE_URL)")
    parser.add_argument("--env-file", type=str, help="Path to a .env file to load")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr")
    sub = parser.add_subparsers(dest="command", metavar="command")
    sub.required = True

    def add(name, handler, help_, symbol=False):
        p = sub.add_parser(name, help=help_)
        if symbol:
            p.add_argument("symbol", type=str.upper, help="Stock symbol")
        p.set_defaults(handler=handler)
        return p

    add("status", _status, "IEX Cloud system status")
    add("quote", _quote, "Quote for a symbol", symbol=True)
    add("company", _company, "Company profile", symbol=True)
    add("stats", _stats, "Key stats", symbol=True)

    p = add("earnings", _earnings, "Recent earnings", symbol=True)
    p.add_argument("--last", type=int, default=1, help="Number of periods (default: 1)")

    p = add("dividends", _dividends, "Dividend history", symbol=True)
    p.add_argument("--range", type=str, default=PathRange.ONE_MONTH.code,
                   choices=[r.code for r in PathRange], help="Date range (default: 1m)")

    add("intraday", _intraday, "Intraday minute prices", symbol=True)

    p = add("historical", _historical, "Historical prices", symbol=True)
    p.add_argument("timeframe", nargs="?", default=HistoricalTimeFrame.ONE_MONTH.code,
                   choices=[t.code for t in HistoricalTimeFrame], help="Time frame (default: 1m)")
    p.add_argument("--date", type=str, help="Single day as YYYYMMDD (overrides timeframe)")
    p.add_argument("--close-only", action="store_true", help="Only return close prices")
    p.add_argument("--interval", type=int, default=0, help="Return every Nth data point")
    p.add_argument("--last", type=int, default=0, help="Return the last N data points")

    add("symbols", _symbols, "All supported symbols")
    add("sectors", _sectors, "All sectors")
    add("tags", _tags, "All tags")
    add("peers", _peers, "Peer symbols", symbol=True)

    p = add("news", _news, "Latest news", symbol=True)
    p.add_argument("--last", type=int, default=10, help="Number of articles (default: 10)")

    add("most-active", _most_active, "Most active stocks")
    add("usage", _usage, "Account usage for the current month")
    add("deep", _deep, "IEX depth of book and trades", symbol=True)
    add("deep-book", _deep_book, "IEX bids and asks", symbol=True)
    add("deep-trades", _deep_trades, "IEX trade reports", symbol=True)
    add("intraday-stats", _intraday_stats, "IEX market-wide stats for today")
    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv(args.env_file or find_dotenv(usecwd=True))
    try:
        settings.reload()
    except ValueError as e:
        log.err(str(e))
        sys.exit(1)

    if args.verbose:
        log.setup_verbose_logging("iexcloud")
        log.info(f"Base URL: {args.base_url or settings.BASE_URL}")

    log.step(f"Running {args.command}")
    try:
        client = IEXCloudClient(token=args.token, base_url=args.base_url)
        title, result, result_type = args.handler(client, args)
    except (ProviderError, DecodeError, ValueError) as e:
        log.err(f"{args.command}: {e}")
        sys.exit(1)

    log.header(title)
    log.json_block(encode(result, result_type))
    if isinstance(result, list):
        if result:
            log.ok(f"{len(result)} records")
        else:
            log.warn("No records returned")


if __name__ == "__main__":
    main()
