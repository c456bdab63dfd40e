"""Tests for IEXCloudClient with mocked HTTP."""

import datetime
import logging

import pytest
import requests
from unittest.mock import MagicMock, patch

from iexcloud.client import (
    DataNotFoundError,
    IEXCloudClient,
    ProviderError,
    RateLimitError,
    ResponseDecodeError,
)
from iexcloud.codecs import DecodeError
from iexcloud.enums import IssueType, PathRange, Period
from iexcloud.models import HistoricalOptions, IntradayHistoricalOptions, Sector

BASE = "https://example.test/stable"


def _last_call(client):
    args, kwargs = client.session.get.call_args
    return args[0], kwargs["params"]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestInit:
    def test_missing_token_raises(self):
        with patch("iexcloud.client.settings") as s:
            s.TOKEN = ""
            with pytest.raises(ValueError, match="IEX_TOKEN"):
                IEXCloudClient()

    def test_token_from_settings(self):
        with patch("iexcloud.client.settings") as s, \
             patch("iexcloud.client.RequestSession") as rs:
            s.TOKEN = "env-token"
            s.BASE_URL = "https://sandbox.test/v1/"
            s.TIMEOUT = 12
            s.MIN_INTERVAL = 0.5
            c = IEXCloudClient()
        assert c.token == "env-token"
        assert c.base_url == "https://sandbox.test/v1"
        rs.assert_called_once_with(timeout=12, min_interval=0.5)

    def test_injected_session(self):
        session = MagicMock()
        c = IEXCloudClient(token="t", session=session)
        assert c.session is session


# ---------------------------------------------------------------------------
# Request layer
# ---------------------------------------------------------------------------

class TestRequestLayer:
    def test_token_in_query(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data={"symbol": "AAPL"})
        client.quote("AAPL")
        url, params = _last_call(client)
        assert url == f"{BASE}/stock/AAPL/quote"
        assert params["token"] == "test-token"

    def test_status_sent_without_token(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data={"status": "up"})
        s = client.status()
        url, params = _last_call(client)
        assert url == f"{BASE}/status"
        assert "token" not in params
        assert s.status == "up"

    def test_404_not_found(self, client, mock_response):
        client.session.get.return_value = mock_response(status_code=404, body="Unknown symbol")
        with pytest.raises(DataNotFoundError) as exc:
            client.company("ZZZZ")
        assert exc.value.status_code == 404

    def test_429_rate_limit(self, client, mock_response):
        client.session.get.return_value = mock_response(status_code=429)
        with pytest.raises(RateLimitError):
            client.quote("AAPL")

    def test_500_provider_error(self, client, mock_response):
        client.session.get.return_value = mock_response(
            status_code=500, body="boom", reason="Internal Server Error"
        )
        with pytest.raises(ProviderError, match="500 Internal Server Error") as exc:
            client.quote("AAPL")
        assert exc.value.status_code == 500

    def test_non_2xx_body_not_decoded(self, client, mock_response):
        client.session.get.return_value = mock_response(status_code=403, body="not json")
        with pytest.raises(ProviderError) as exc:
            client.quote("AAPL")
        assert not isinstance(exc.value, ResponseDecodeError)

    def test_transport_error(self, client):
        client.session.get.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(ProviderError, match="Request failed"):
            client.quote("AAPL")

    def test_decode_failure(self, client, mock_response):
        client.session.get.return_value = mock_response(
            json_data={"symbol": "AAPL", "latestUpdate": "yesterday"}
        )
        with pytest.raises(ResponseDecodeError) as exc:
            client.quote("AAPL")
        assert exc.value.errors
        assert isinstance(exc.value.__cause__, DecodeError)

    def test_token_not_logged(self, client, mock_response, caplog):
        client.session.get.return_value = mock_response(json_data={"symbol": "AAPL"})
        with caplog.at_level(logging.DEBUG, logger="iexcloud.client"):
            client.quote("AAPL")
        assert "/stock/AAPL/quote" in caplog.text
        assert "test-token" not in caplog.text

    def test_symbol_path_escaped(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data={})
        client.company("BRK/A")
        url, _ = _last_call(client)
        assert url == f"{BASE}/stock/BRK%2FA/company"


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

class TestEndpoints:
    def test_price_bare_number(self, client, mock_response):
        client.session.get.return_value = mock_response(body="150.23")
        assert client.price("AAPL") == pytest.approx(150.23)
        url, params = _last_call(client)
        assert url == f"{BASE}/stock/AAPL/price"
        assert params["token"] == "test-token"

    def test_company(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data={
            "symbol": "AAPL", "companyName": "Apple Inc.", "issueType": "cs",
        })
        c = client.company("AAPL")
        assert c.name == "Apple Inc."
        assert c.issue_type is IssueType.COMMON_STOCK

    def test_balance_sheets_period(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data={"symbol": "AAPL", "balancesheet": []})
        client.balance_sheets("AAPL", 4, Period.QUARTER)
        url, params = _last_call(client)
        assert url == f"{BASE}/stock/AAPL/balance-sheet/4"
        assert params["period"] == "quarter"

    def test_financials_default_annual(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data={"symbol": "AAPL", "financials": []})
        client.financials("AAPL", 1)
        _, params = _last_call(client)
        assert params["period"] == "annual"

    def test_dividends_range(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data=[
            {"exDate": "2021-11-05", "paymentDate": "2021-11-11", "amount": 0.22},
        ])
        divs = client.dividends("AAPL", PathRange.ONE_YEAR)
        url, _ = _last_call(client)
        assert url == f"{BASE}/stock/AAPL/dividends/1y"
        assert divs[0].ex_date == datetime.date(2021, 11, 5)
        assert divs[0].amount == 0.22

    def test_dividends_range_as_code(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data=[])
        client.dividends("AAPL", "next")
        url, _ = _last_call(client)
        assert url.endswith("/dividends/next")

    def test_invalid_range(self, client):
        with pytest.raises(DecodeError, match="invalid path range"):
            client.splits("AAPL", "7y")
        client.session.get.assert_not_called()

    def test_historical_prices(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data=[
            {"date": "2021-12-03", "close": 161.84, "volume": 118023116},
        ])
        points = client.historical_prices(
            "AAPL", "3m", HistoricalOptions(chart_close_only=True)
        )
        url, params = _last_call(client)
        assert url == f"{BASE}/stock/AAPL/chart/3m"
        assert params == {"chartCloseOnly": "true", "token": "test-token"}
        assert points[0].date == datetime.date(2021, 12, 3)

    def test_historical_invalid_timeframe(self, client):
        with pytest.raises(DecodeError, match="invalid historical time frame"):
            client.historical_prices("AAPL", "10y")

    def test_historical_by_day(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data=[])
        client.historical_prices_by_day("AAPL", datetime.date(2021, 12, 3))
        url, params = _last_call(client)
        assert url == f"{BASE}/stock/AAPL/chart/date/20211203"
        assert params == {"token": "test-token"}

    def test_intraday_historical_by_day(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data=[
            {"date": "2021-12-03", "minute": "09:30", "close": 160.0},
        ])
        points = client.intraday_historical_prices_by_day(
            "AAPL", datetime.date(2021, 12, 3), IntradayHistoricalOptions(chart_iex_only=True)
        )
        url, params = _last_call(client)
        assert url == f"{BASE}/stock/AAPL/chart/date/20211203"
        assert params["chartByDay"] == "true"
        assert params["chartIEXOnly"] == "true"
        assert points[0].minute == datetime.timedelta(hours=9, minutes=30)

    def test_market_list(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data=[{"symbol": "AAPL"}])
        quotes = client.most_active()
        url, _ = _last_call(client)
        assert url == f"{BASE}/stock/market/list/mostactive"
        assert quotes[0].symbol == "AAPL"

    def test_collection_by_sector(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data=[])
        client.collection_by_sector(Sector(name="Technology"))
        url, params = _last_call(client)
        assert url == f"{BASE}/stock/market/collection/sector"
        assert params["collectionName"] == "Technology"

    def test_tops_joins_symbols(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data=[])
        client.tops(["AAPL", "MSFT"])
        url, params = _last_call(client)
        assert url == f"{BASE}/tops"
        assert params["symbols"] == "AAPL,MSFT"

    def test_exchange_rate(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data={
            "date": "2021-12-03", "fromCurrency": "EUR", "toCurrency": "USD", "rate": 1.13,
        })
        r = client.exchange_rate("EUR", "USD")
        url, _ = _last_call(client)
        assert url == f"{BASE}/fx/rate/EUR/USD"
        assert r.from_currency == "EUR"
        assert r.rate == 1.13

    def test_next_trading_day(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data=[
            {"date": "2021-12-06", "settlementDate": "2021-12-08"},
        ])
        d = client.next_trading_day()
        url, _ = _last_call(client)
        assert url == f"{BASE}/ref-data/us/dates/trade/next/1"
        assert d.settlement_date == datetime.date(2021, 12, 8)

    def test_previous_holiday_empty(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data=[])
        with pytest.raises(DataNotFoundError):
            client.previous_holiday()

    def test_peers(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data=["MSFT", "GOOGL"])
        assert client.peers("AAPL") == ["MSFT", "GOOGL"]

    def test_usage(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data={
            "monthlyUsage": 1200, "dailyUsage": {"20211201": 40},
        })
        u = client.usage()
        url, _ = _last_call(client)
        assert url == f"{BASE}/account/usage"
        assert u.daily_usage == {"20211201": 40}

    def test_decode_overflow_is_response_decode_error(self, client, mock_response):
        client.session.get.return_value = mock_response(
            body='{"symbol": "AAPL", "latestUpdate": 99999999999999999999}'
        )
        with pytest.raises(ResponseDecodeError, match="epoch time"):
            client.quote("AAPL")


# ---------------------------------------------------------------------------
# IEX market data
# ---------------------------------------------------------------------------

class TestDEEP:
    def test_deep(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data={
            "symbol": "SNAP",
            "marketPercent": 0.00837,
            "volume": 359425,
            "lastSalePrice": 22.75,
            "lastSaleTime": 1494359999999,
            "bids": [{"price": 22.7, "size": 100, "timestamp": 1494359944000}],
            "asks": [],
            "systemEvent": {"systemEvent": "R", "timestamp": 1494627280000},
            "tradingStatus": {"status": "T", "reason": "", "timestamp": 1494588017674},
            "opHaltStatus": {"isHalted": False, "timestamp": 1494588017674},
            "ssrStatus": {"isSSR": True, "detail": "N", "timestamp": 1494588017674},
            "securityEvent": {"securityEvent": "MarketOpen", "timestamp": 1494595800005},
            "trades": [{"price": 22.75, "size": 100, "tradeId": 517341294, "isISO": True,
                        "timestamp": 1494359999999}],
            "tradeBreaks": [],
        })
        d = client.deep("SNAP")
        url, params = _last_call(client)
        assert url == f"{BASE}/deep"
        assert params["symbols"] == "SNAP"
        assert d.last_sale_time.timestamp() == 1494359999
        assert d.bids[0].size == 100
        assert d.ssr_status.is_ssr is True
        assert d.trading_status.status == "T"
        assert d.security_event.security_event == "MarketOpen"
        assert d.trades[0].is_iso is True
        assert d.trade_breaks == []

    def test_deep_book_keyed_by_symbol(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data={
            "AAPL": {"bids": [{"price": 160.1, "size": 200, "timestamp": 1638820374000}],
                     "asks": []},
            "MSFT": {"bids": [], "asks": [{"price": 330.0, "size": 50, "timestamp": -1}]},
        })
        book = client.deep_book(["AAPL", "MSFT"])
        url, params = _last_call(client)
        assert url == f"{BASE}/deep/book"
        assert params["symbols"] == "AAPL,MSFT"
        assert book["AAPL"].bids[0].price == 160.1
        assert book["MSFT"].asks[0].timestamp is None

    def test_deep_trades_keyed_by_symbol(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data={
            "AAPL": [{"price": 160.1, "size": 10, "tradeId": 1, "isOddLot": True,
                      "timestamp": 1638820374000}],
        })
        trades = client.deep_trades("AAPL")
        url, params = _last_call(client)
        assert url == f"{BASE}/deep/trades"
        assert params["symbols"] == "AAPL"
        assert trades["AAPL"][0].is_odd_lot is True

    def test_intraday_stats(self, client, mock_response):
        client.session.get.return_value = mock_response(json_data={
            "volume": {"value": 26908038, "lastUpdated": 1480433817317},
            "symbolsTraded": {"value": 4089, "lastUpdated": 1480433817317},
            "marketShare": {"value": 0.01967, "lastUpdated": 1480433817317},
        })
        stats = client.intraday_stats()
        url, params = _last_call(client)
        assert url == f"{BASE}/stats/intraday"
        assert params == {"token": "test-token"}
        assert stats.volume.value == 26908038
        assert stats.symbols_traded.last_updated.timestamp() == 1480433817
        assert stats.routed_volume is None
