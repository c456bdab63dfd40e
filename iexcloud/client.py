"""
IEX Cloud API client.

One method per endpoint. Each builds the endpoint path, performs a GET
through ``RequestSession`` and runs the body through the decode boundary
in ``iexcloud.codecs``.

API documentation: https://iexcloud.io/docs/api/
"""

import datetime
import logging
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote as _quote

import requests

from iexcloud.codecs import DecodeError, decode
from iexcloud.config import settings
from iexcloud.enums import HistoricalTimeFrame, PathRange, Period
from iexcloud.models import (
    AccountMetadata, AdvancedStats, BalanceSheets, Book, CashFlows,
    CEOCompensation, Company, CryptoQuote, CryptoSymbol, DEEP, DEEPBook,
    DelayedQuote,
    Dividend, Earnings, EarningsToday, EffectiveSpread, Estimates,
    ExchangeRate, Financials, FundOwner, FXSymbols, HistoricalDataPoint,
    HistoricalOptions, IncomeStatements, InsiderRoster, InsiderSummary,
    InsiderTransaction, InstitutionalOwner, IntradayHistoricalDataPoint,
    IntradayHistoricalOptions, IntradayPrice, IntradayStats, KeyStats,
    LargestTrade, Last,
    Logo, Market, News, OHLC, OTCSymbol, PreviousDay, PriceTarget, Quote,
    Recommendation, RelevantStocks, Sector, SectorPerformance, Split, Status,
    Symbol, Tag, TOPS, Trade, TradedSymbol, TradeHolidayDate, USExchange, Usage,
    VenueVolume,
)
from iexcloud.utils.session import RequestSession

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ProviderError(Exception):
    """Base exception for API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(ProviderError):
    """Raised when the API answers 429 Too Many Requests."""
    pass


class DataNotFoundError(ProviderError):
    """Raised when the API has no data for the requested resource (404)."""
    pass


class ResponseDecodeError(ProviderError):
    """Raised when a 2xx body fails to decode into the expected model."""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []


def _path(value: str) -> str:
    """Escape a value for use as a single path segment."""
    return _quote(str(value), safe="")


class IEXCloudClient:
    """
    Client for the IEX Cloud REST API.

    Args:
        token: Publishable (or secret) API token. Falls back to IEX_TOKEN.
        base_url: API root, e.g. the sandbox URL. Falls back to IEX_BASE_URL.
        session: Object with a ``get(url, params=...)`` method returning a
            response. Defaults to a ``RequestSession``.
        timeout: Request timeout in seconds. Falls back to IEX_TIMEOUT.
        min_interval: Minimum seconds between requests. Falls back to
            IEX_MIN_INTERVAL; 0 disables throttling.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        session: Optional[Any] = None,
        timeout: Optional[float] = None,
        min_interval: Optional[float] = None,
    ):
        self.token = token or settings.TOKEN
        if not self.token:
            raise ValueError(
                "IEX Cloud token required. Set IEX_TOKEN env var or pass token."
            )
        self.base_url = (base_url or settings.BASE_URL).rstrip("/")
        if session is None:
            session = RequestSession(
                timeout=timeout if timeout is not None else settings.TIMEOUT,
                min_interval=min_interval if min_interval is not None else settings.MIN_INTERVAL,
            )
        self.session = session
        self.name = "IEX Cloud"

    # -----------------------------------------------------------------------
    # Request layer
    # -----------------------------------------------------------------------

    def _make_request(self, endpoint: str, params: Optional[Dict] = None,
                      with_token: bool = True) -> bytes:
        """
        GET an endpoint and return the raw body.

        Raises:
            RateLimitError: On HTTP 429
            DataNotFoundError: On HTTP 404
            ProviderError: On any other non-2xx status or transport failure
        """
        url = self.base_url + endpoint
        query = dict(params or {})
        logger.debug(f"GET {url} params={query}")
        if with_token:
            query["token"] = self.token

        try:
            resp = self.session.get(url, params=query)
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"Request failed: {e}") from e

        if resp.status_code == 429:
            raise RateLimitError("Rate limit exceeded", status_code=429)
        if resp.status_code == 404:
            raise DataNotFoundError(f"No data at {endpoint}", status_code=404)
        if not resp:
            logger.warning(f"{endpoint}: HTTP {resp.status_code}")
            raise ProviderError(
                f"{resp.status_code} {resp.reason}", status_code=resp.status_code
            )
        return resp.content

    def get_json(self, endpoint: str, model: Any, params: Optional[Dict] = None,
                 with_token: bool = True) -> Any:
        """
        GET an endpoint and decode the JSON body into ``model``.

        Args:
            endpoint: Path below the base URL, starting with "/"
            model: Response model or container type, e.g. ``List[Quote]``
            params: Extra query parameters
            with_token: Add the API token to the query string

        Raises:
            ResponseDecodeError: If the body does not decode into ``model``
        """
        body = self._make_request(endpoint, params=params, with_token=with_token)
        try:
            return decode(model, body)
        except DecodeError as e:
            logger.warning(f"{endpoint}: {e}")
            raise ResponseDecodeError(str(e), errors=e.errors) from e

    def get_float(self, endpoint: str, params: Optional[Dict] = None) -> float:
        """GET an endpoint whose body is a bare JSON number."""
        return self.get_json(endpoint, float, params=params)

    # -----------------------------------------------------------------------
    # Account
    # -----------------------------------------------------------------------

    def account_metadata(self) -> AccountMetadata:
        """Account tier, payment status and message usage. Requires a secret token."""
        return self.get_json("/account/metadata", AccountMetadata)

    def usage(self) -> Usage:
        return self.get_json("/account/usage", Usage)

    def status(self) -> Status:
        """IEX Cloud system status. Sent without a token."""
        return self.get_json("/status", Status, with_token=False)

    # -----------------------------------------------------------------------
    # Stock fundamentals
    # -----------------------------------------------------------------------

    def balance_sheets(self, symbol: str, num: int,
                       period: Union[Period, str] = Period.ANNUAL) -> BalanceSheets:
        return self.get_json(
            f"/stock/{_path(symbol)}/balance-sheet/{num}", BalanceSheets,
            params={"period": Period.decode(period).code},
        )

    def cash_flows(self, symbol: str, num: int,
                   period: Union[Period, str] = Period.ANNUAL) -> CashFlows:
        return self.get_json(
            f"/stock/{_path(symbol)}/cash-flow/{num}", CashFlows,
            params={"period": Period.decode(period).code},
        )

    def income_statements(self, symbol: str, num: int,
                          period: Union[Period, str] = Period.ANNUAL) -> IncomeStatements:
        return self.get_json(
            f"/stock/{_path(symbol)}/income/{num}", IncomeStatements,
            params={"period": Period.decode(period).code},
        )

    def financials(self, symbol: str, num: int,
                   period: Union[Period, str] = Period.ANNUAL) -> Financials:
        """Income statement, balance sheet and cash flow data for ``num`` periods."""
        return self.get_json(
            f"/stock/{_path(symbol)}/financials/{num}", Financials,
            params={"period": Period.decode(period).code},
        )

    def dividends(self, symbol: str,
                  range_: Union[PathRange, str] = PathRange.ONE_MONTH) -> List[Dividend]:
        return self.get_json(
            f"/stock/{_path(symbol)}/dividends/{PathRange.decode(range_).code}",
            List[Dividend],
        )

    def splits(self, symbol: str,
               range_: Union[PathRange, str] = PathRange.ONE_MONTH) -> List[Split]:
        return self.get_json(
            f"/stock/{_path(symbol)}/splits/{PathRange.decode(range_).code}",
            List[Split],
        )

    def earnings(self, symbol: str, num: int = 1) -> Earnings:
        return self.get_json(f"/stock/{_path(symbol)}/earnings/{num}", Earnings)

    def earnings_today(self) -> EarningsToday:
        return self.get_json("/stock/market/today-earnings", EarningsToday)

    def key_stats(self, symbol: str) -> KeyStats:
        return self.get_json(f"/stock/{_path(symbol)}/stats", KeyStats)

    def advanced_stats(self, symbol: str) -> AdvancedStats:
        return self.get_json(f"/stock/{_path(symbol)}/advanced-stats", AdvancedStats)

    # -----------------------------------------------------------------------
    # Stock research
    # -----------------------------------------------------------------------

    def estimates(self, symbol: str, num: int = 1) -> Estimates:
        return self.get_json(f"/stock/{_path(symbol)}/estimates/{num}", Estimates)

    def price_target(self, symbol: str) -> PriceTarget:
        return self.get_json(f"/stock/{_path(symbol)}/price-target", PriceTarget)

    def recommendation_trends(self, symbol: str) -> List[Recommendation]:
        return self.get_json(
            f"/stock/{_path(symbol)}/recommendation-trends", List[Recommendation]
        )

    def fund_ownership(self, symbol: str) -> List[FundOwner]:
        return self.get_json(f"/stock/{_path(symbol)}/fund-ownership", List[FundOwner])

    def institutional_ownership(self, symbol: str) -> List[InstitutionalOwner]:
        return self.get_json(
            f"/stock/{_path(symbol)}/institutional-ownership", List[InstitutionalOwner]
        )

    # -----------------------------------------------------------------------
    # Stock profiles
    # -----------------------------------------------------------------------

    def company(self, symbol: str) -> Company:
        return self.get_json(f"/stock/{_path(symbol)}/company", Company)

    def ceo_compensation(self, symbol: str) -> CEOCompensation:
        return self.get_json(f"/stock/{_path(symbol)}/ceo-compensation", CEOCompensation)

    def insider_roster(self, symbol: str) -> List[InsiderRoster]:
        return self.get_json(f"/stock/{_path(symbol)}/insider-roster", List[InsiderRoster])

    def insider_summary(self, symbol: str) -> List[InsiderSummary]:
        return self.get_json(f"/stock/{_path(symbol)}/insider-summary", List[InsiderSummary])

    def insider_transactions(self, symbol: str) -> List[InsiderTransaction]:
        return self.get_json(
            f"/stock/{_path(symbol)}/insider-transactions", List[InsiderTransaction]
        )

    def logo(self, symbol: str) -> Logo:
        return self.get_json(f"/stock/{_path(symbol)}/logo", Logo)

    def peers(self, symbol: str) -> List[str]:
        return self.get_json(f"/stock/{_path(symbol)}/peers", List[str])

    def relevant_stocks(self, symbol: str) -> RelevantStocks:
        return self.get_json(f"/stock/{_path(symbol)}/relevant", RelevantStocks)

    # -----------------------------------------------------------------------
    # Stock prices
    # -----------------------------------------------------------------------

    def book(self, symbol: str) -> Book:
        return self.get_json(f"/stock/{_path(symbol)}/book", Book)

    def delayed_quote(self, symbol: str) -> DelayedQuote:
        return self.get_json(f"/stock/{_path(symbol)}/delayed-quote", DelayedQuote)

    def effective_spreads(self, symbol: str) -> List[EffectiveSpread]:
        return self.get_json(
            f"/stock/{_path(symbol)}/effective-spread", List[EffectiveSpread]
        )

    def intraday_prices(self, symbol: str) -> List[IntradayPrice]:
        return self.get_json(f"/stock/{_path(symbol)}/intraday-prices", List[IntradayPrice])

    def largest_trades(self, symbol: str) -> List[LargestTrade]:
        return self.get_json(f"/stock/{_path(symbol)}/largest-trades", List[LargestTrade])

    def ohlc(self, symbol: str) -> OHLC:
        return self.get_json(f"/stock/{_path(symbol)}/ohlc", OHLC)

    def previous_day(self, symbol: str) -> PreviousDay:
        return self.get_json(f"/stock/{_path(symbol)}/previous", PreviousDay)

    def price(self, symbol: str) -> float:
        """Latest price as a bare number."""
        return self.get_float(f"/stock/{_path(symbol)}/price")

    def quote(self, symbol: str) -> Quote:
        return self.get_json(f"/stock/{_path(symbol)}/quote", Quote)

    def volume_by_venue(self, symbol: str) -> List[VenueVolume]:
        return self.get_json(f"/stock/{_path(symbol)}/volume-by-venue", List[VenueVolume])

    def historical_prices(
        self,
        symbol: str,
        timeframe: Union[HistoricalTimeFrame, str] = HistoricalTimeFrame.ONE_MONTH,
        options: Optional[HistoricalOptions] = None,
    ) -> List[HistoricalDataPoint]:
        """
        Historically adjusted prices over a time frame.

        Args:
            symbol: Stock symbol
            timeframe: One of the HistoricalTimeFrame codes (1m, 3m, ..., max)
            options: Optional chart query params; unset values are not sent

        Raises:
            DecodeError: If ``timeframe`` is not a known time frame
        """
        timeframe = HistoricalTimeFrame.decode(timeframe)
        return self.get_json(
            f"/stock/{_path(symbol)}/chart/{timeframe.code}",
            List[HistoricalDataPoint],
            params=options.to_params() if options else None,
        )

    def historical_prices_by_day(
        self,
        symbol: str,
        day: datetime.date,
        options: Optional[HistoricalOptions] = None,
    ) -> List[HistoricalDataPoint]:
        return self.get_json(
            f"/stock/{_path(symbol)}/chart/date/{day.strftime('%Y%m%d')}",
            List[HistoricalDataPoint],
            params=options.to_params() if options else None,
        )

    def intraday_historical_prices(
        self,
        symbol: str,
        options: Optional[IntradayHistoricalOptions] = None,
    ) -> List[IntradayHistoricalDataPoint]:
        return self.get_json(
            f"/stock/{_path(symbol)}/chart/1d",
            List[IntradayHistoricalDataPoint],
            params=options.to_params() if options else None,
        )

    def intraday_historical_prices_by_day(
        self,
        symbol: str,
        day: datetime.date,
        options: Optional[IntradayHistoricalOptions] = None,
    ) -> List[IntradayHistoricalDataPoint]:
        params = {"chartByDay": "true"}
        if options:
            params.update(options.to_params())
        return self.get_json(
            f"/stock/{_path(symbol)}/chart/date/{day.strftime('%Y%m%d')}",
            List[IntradayHistoricalDataPoint],
            params=params,
        )

    # -----------------------------------------------------------------------
    # Market info
    # -----------------------------------------------------------------------

    def collection_by_sector(self, sector: Union[Sector, str]) -> List[Quote]:
        name = sector.name if isinstance(sector, Sector) else sector
        return self.get_json(
            "/stock/market/collection/sector", List[Quote],
            params={"collectionName": name},
        )

    def collection_by_tag(self, tag: Union[Tag, str]) -> List[Quote]:
        name = tag.name if isinstance(tag, Tag) else tag
        return self.get_json(
            "/stock/market/collection/tag", List[Quote],
            params={"collectionName": name},
        )

    def _list(self, name: str) -> List[Quote]:
        return self.get_json(f"/stock/market/list/{name}", List[Quote])

    def most_active(self) -> List[Quote]:
        return self._list("mostactive")

    def gainers(self) -> List[Quote]:
        return self._list("gainers")

    def losers(self) -> List[Quote]:
        return self._list("losers")

    def iex_volume(self) -> List[Quote]:
        return self._list("iexvolume")

    def iex_percent(self) -> List[Quote]:
        return self._list("iexpercent")

    def in_focus(self) -> List[Quote]:
        return self._list("infocus")

    def markets(self) -> List[Market]:
        return self.get_json("/market", List[Market])

    def news(self, symbol: str, num: int = 10) -> List[News]:
        return self.get_json(f"/stock/{_path(symbol)}/news/last/{num}", List[News])

    def market_news(self, num: int = 10) -> List[News]:
        return self.get_json(f"/stock/market/news/last/{num}", List[News])

    def sector_performance(self) -> List[SectorPerformance]:
        return self.get_json("/stock/market/sector-performance", List[SectorPerformance])

    # -----------------------------------------------------------------------
    # Reference data
    # -----------------------------------------------------------------------

    def symbols(self) -> List[Symbol]:
        return self.get_json("/ref-data/symbols", List[Symbol])

    def iex_symbols(self) -> List[TradedSymbol]:
        return self.get_json("/ref-data/iex/symbols", List[TradedSymbol])

    def otc_symbols(self) -> List[OTCSymbol]:
        return self.get_json("/ref-data/otc/symbols", List[OTCSymbol])

    def mutual_fund_symbols(self) -> List[Symbol]:
        return self.get_json("/ref-data/mutual-funds/symbols", List[Symbol])

    def crypto_symbols(self) -> List[CryptoSymbol]:
        return self.get_json("/ref-data/crypto/symbols", List[CryptoSymbol])

    def fx_symbols(self) -> FXSymbols:
        return self.get_json("/ref-data/fx/symbols", FXSymbols)

    def us_exchanges(self) -> List[USExchange]:
        return self.get_json("/ref-data/market/us/exchanges", List[USExchange])

    def sectors(self) -> List[Sector]:
        return self.get_json("/ref-data/sectors", List[Sector])

    def tags(self) -> List[Tag]:
        return self.get_json("/ref-data/tags", List[Tag])

    def _dates(self, kind: str, direction: str, num: int) -> List[TradeHolidayDate]:
        return self.get_json(
            f"/ref-data/us/dates/{kind}/{direction}/{num}", List[TradeHolidayDate]
        )

    def next_trading_day(self) -> TradeHolidayDate:
        return self._first(self._dates("trade", "next", 1), "next trading day")

    def next_trading_days(self, num: int) -> List[TradeHolidayDate]:
        return self._dates("trade", "next", num)

    def previous_trading_day(self) -> TradeHolidayDate:
        return self._first(self._dates("trade", "last", 1), "previous trading day")

    def next_holiday(self) -> TradeHolidayDate:
        return self._first(self._dates("holiday", "next", 1), "next holiday")

    def next_holidays(self, num: int) -> List[TradeHolidayDate]:
        return self._dates("holiday", "next", num)

    def previous_holiday(self) -> TradeHolidayDate:
        return self._first(self._dates("holiday", "last", 1), "previous holiday")

    @staticmethod
    def _first(dates: List[TradeHolidayDate], what: str) -> TradeHolidayDate:
        if not dates:
            raise DataNotFoundError(f"No {what} returned")
        return dates[0]

    # -----------------------------------------------------------------------
    # Forex, crypto & IEX market data
    # -----------------------------------------------------------------------

    def exchange_rate(self, from_currency: str, to_currency: str) -> ExchangeRate:
        return self.get_json(
            f"/fx/rate/{_path(from_currency)}/{_path(to_currency)}", ExchangeRate
        )

    def crypto(self, symbol: str) -> CryptoQuote:
        return self.get_json(f"/crypto/{_path(symbol)}/quote", CryptoQuote)

    def tops(self, symbols: Union[str, List[str]]) -> List[TOPS]:
        """Real-time top of book quotations from IEX."""
        if isinstance(symbols, str):
            symbols = [symbols]
        return self.get_json("/tops", List[TOPS], params={"symbols": ",".join(symbols)})

    def last(self, symbols: Union[str, List[str]]) -> List[Last]:
        """IEX last sale price, size and time."""
        if isinstance(symbols, str):
            symbols = [symbols]
        return self.get_json("/tops/last", List[Last], params={"symbols": ",".join(symbols)})

    def deep(self, symbol: str) -> DEEP:
        """IEX depth of book, trades and status events for one symbol."""
        return self.get_json("/deep", DEEP, params={"symbols": symbol})

    def deep_book(self, symbols: Union[str, List[str]]) -> Dict[str, DEEPBook]:
        """IEX bids and asks, keyed by symbol."""
        if isinstance(symbols, str):
            symbols = [symbols]
        return self.get_json(
            "/deep/book", Dict[str, DEEPBook], params={"symbols": ",".join(symbols)}
        )

    def deep_trades(self, symbols: Union[str, List[str]]) -> Dict[str, List[Trade]]:
        """IEX trade reports, keyed by symbol."""
        if isinstance(symbols, str):
            symbols = [symbols]
        return self.get_json(
            "/deep/trades", Dict[str, List[Trade]], params={"symbols": ",".join(symbols)}
        )

    def intraday_stats(self) -> IntradayStats:
        """IEX market-wide statistics for the current day."""
        return self.get_json("/stats/intraday", IntradayStats)
