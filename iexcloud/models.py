"""
Pydantic response models for the IEX Cloud API.

Field names are snake_case; the API's camelCase keys are generated as
aliases, with explicit aliases where IEX's naming is irregular (``CEO``,
``EPSReportDate``, ...). Scalars with special wire formats use the codecs
in ``iexcloud.codecs``.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from iexcloud.codecs import CalendarDate, ClockOfDay, EpochTimestamp
from iexcloud.enums import AnnounceTimeField, AnnounceTime, IssueTypeField, IssueType


class IEXModel(BaseModel):
    """Base for all response models."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # A JSON null leaves the field at its default, same as a missing key.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# ---------------------------------------------------------------------------
# Account & API system
# ---------------------------------------------------------------------------

class Status(IEXModel):
    """IEX Cloud system status."""
    status: str = ""
    version: str = ""
    time: EpochTimestamp = None


class AccountMetadata(IEXModel):
    """Account tier, payment status and message usage."""
    pay_as_you_go: bool = Field(False, alias="overagesEnabled")
    effective_date: EpochTimestamp = None
    end_date_effective: EpochTimestamp = None
    subscription_term: str = Field("", alias="subscriptionTermType")
    tier_name: str = ""
    message_limit: Optional[int] = None
    messages_used: Optional[int] = None


class Usage(IEXModel):
    """Current month usage for the account."""
    monthly_usage: Optional[int] = None
    monthly_pay_as_you_go: Optional[int] = None
    daily_usage: Dict[str, int] = {}
    token_usage: Dict[str, int] = {}
    key_usage: Dict[str, int] = {}


# ---------------------------------------------------------------------------
# Stock profiles
# ---------------------------------------------------------------------------

class Company(IEXModel):
    """Company data from the /company endpoint."""
    symbol: str = ""
    name: str = Field("", alias="companyName")
    exchange: str = ""
    industry: str = ""
    website: str = ""
    description: str = ""
    ceo: str = Field("", alias="CEO")
    security_name: str = ""
    issue_type: IssueTypeField = IssueType.BLANK
    sector: str = ""
    primary_sic_code: Optional[int] = None
    employees: Optional[int] = None
    tags: List[str] = []
    address: str = ""
    address2: str = ""
    state: str = ""
    city: str = ""
    zip: str = ""
    country: str = ""
    phone: str = ""


class Logo(IEXModel):
    url: str = ""


class RelevantStocks(IEXModel):
    """Peers, or most active symbols when peers are not available."""
    peers: bool = False
    symbols: List[str] = []


class InsiderRoster(IEXModel):
    entity_name: str = ""
    position: Optional[int] = None
    report_date: Optional[CalendarDate] = None


class InsiderSummary(IEXModel):
    name: str = Field("", alias="fullName")
    net_transaction: Optional[int] = None
    reported_title: str = ""
    total_bought: Optional[int] = None
    total_sold: Optional[int] = None


class InsiderTransaction(IEXModel):
    effective_date: EpochTimestamp = None
    name: str = Field("", alias="fullName")
    reported_title: str = ""
    price: Optional[float] = Field(None, alias="tranPrice")
    shares: Optional[int] = Field(None, alias="tranShares")
    value: Optional[float] = Field(None, alias="tranValue")


class CEOCompensation(IEXModel):
    symbol: str = ""
    name: str = ""
    company: str = Field("", alias="companyName")
    location: str = ""
    salary: Optional[int] = None
    bonus: Optional[int] = None
    stock_awards: Optional[int] = None
    option_awards: Optional[int] = None
    non_equity_incentives: Optional[int] = None
    pension_and_deferred: Optional[int] = None
    other_compensation: Optional[int] = Field(None, alias="otherComp")
    total: Optional[int] = None
    year: Optional[int] = None


# ---------------------------------------------------------------------------
# Stock prices
# ---------------------------------------------------------------------------

class Quote(IEXModel):
    """Quote data from the /quote endpoint."""
    symbol: str = ""
    company_name: str = ""
    calculation_price: str = ""
    open: Optional[float] = None
    open_time: EpochTimestamp = None
    close: Optional[float] = None
    close_time: EpochTimestamp = None
    high: Optional[float] = None
    low: Optional[float] = None
    latest_price: Optional[float] = None
    latest_source: str = ""
    latest_time: str = ""
    latest_update: EpochTimestamp = None
    latest_volume: Optional[int] = None
    iex_realtime_price: Optional[float] = None
    iex_realtime_size: Optional[int] = None
    iex_last_updated: EpochTimestamp = None
    delayed_price: Optional[float] = None
    delayed_price_time: EpochTimestamp = None
    extended_price: Optional[float] = None
    extended_change: Optional[float] = None
    extended_change_percent: Optional[float] = None
    extended_price_time: EpochTimestamp = None
    previous_close: Optional[float] = None
    change: Optional[float] = None
    change_percent: Optional[float] = None
    iex_market_percent: Optional[float] = None
    iex_volume: Optional[int] = None
    avg_total_volume: Optional[int] = None
    iex_bid_price: Optional[float] = None
    iex_bid_size: Optional[int] = None
    iex_ask_price: Optional[float] = None
    iex_ask_size: Optional[int] = None
    market_cap: Optional[int] = None
    week52_high: Optional[float] = None
    week52_low: Optional[float] = None
    ytd_change: Optional[float] = None
    pe_ratio: Optional[float] = None


class DelayedQuote(IEXModel):
    """15 minute delayed market quote."""
    symbol: str = ""
    delayed_price: Optional[float] = None
    delayed_size: Optional[int] = None
    delayed_price_time: EpochTimestamp = None
    high: Optional[float] = None
    low: Optional[float] = None
    total_volume: Optional[int] = None
    processed_time: EpochTimestamp = None


class PreviousDay(IEXModel):
    """Previous day adjusted price data."""
    symbol: str = ""
    date: Optional[CalendarDate] = None
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None
    volume: Optional[int] = None
    unadjusted_volume: Optional[int] = None
    change: Optional[float] = None
    change_percent: Optional[float] = None


class OpenClose(IEXModel):
    price: Optional[float] = None
    time: EpochTimestamp = None


class OHLC(IEXModel):
    open: Optional[OpenClose] = None
    close: Optional[OpenClose] = None
    high: Optional[float] = None
    low: Optional[float] = None


class IntradayPrice(IEXModel):
    """Aggregated intraday price in a one minute bucket."""
    date: Optional[CalendarDate] = None
    minute: Optional[ClockOfDay] = None
    label: str = ""
    market_open: Optional[float] = None
    market_close: Optional[float] = None
    market_high: Optional[float] = None
    market_low: Optional[float] = None
    market_average: Optional[float] = None
    market_volume: Optional[int] = None
    market_notional: Optional[float] = None
    market_number_of_trades: Optional[int] = None
    market_change_over_time: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    open: Optional[float] = None
    close: Optional[float] = None
    average: Optional[float] = None
    volume: Optional[int] = None
    notional: Optional[float] = None
    number_of_trades: Optional[int] = None
    change_over_time: Optional[float] = None


class HistoricalDataPoint(IEXModel):
    """A single historically adjusted data point."""
    date: Optional[CalendarDate] = None
    open: Optional[float] = None
    close: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    volume: Optional[int] = None
    u_open: Optional[float] = None
    u_close: Optional[float] = None
    u_high: Optional[float] = None
    u_low: Optional[float] = None
    u_volume: Optional[int] = None
    change: Optional[float] = None
    change_percent: Optional[float] = None
    label: str = ""
    change_over_time: Optional[float] = None


class IntradayHistoricalDataPoint(IEXModel):
    """A single intraday historical data point."""
    date: Optional[CalendarDate] = None
    minute: Optional[ClockOfDay] = None
    label: str = ""
    high: Optional[float] = None
    low: Optional[float] = None
    average: Optional[float] = None
    volume: Optional[int] = None
    notional: Optional[float] = None
    number_of_trades: Optional[int] = None
    market_high: Optional[float] = None
    market_low: Optional[float] = None
    market_average: Optional[float] = None
    market_volume: Optional[int] = None
    market_notional: Optional[float] = None
    market_number_of_trades: Optional[int] = None
    open: Optional[float] = None
    close: Optional[float] = None
    market_open: Optional[float] = None
    market_close: Optional[float] = None
    change_over_time: Optional[float] = None
    market_change_over_time: Optional[float] = None


class LargestTrade(IEXModel):
    """15 minute delayed, last sale eligible trade."""
    price: Optional[float] = None
    size: Optional[int] = None
    time: EpochTimestamp = None
    time_label: str = ""
    venue: str = ""
    venue_name: str = ""


class BidAsk(IEXModel):
    price: Optional[float] = None
    size: Optional[int] = None
    timestamp: EpochTimestamp = None


class Trade(IEXModel):
    price: Optional[float] = None
    size: Optional[int] = None
    trade_id: Optional[int] = None
    is_iso: bool = Field(False, alias="isISO")
    is_odd_lot: bool = False
    is_outside_regular_hours: bool = False
    is_single_price_cross: bool = False
    is_trade_through_exempt: bool = False
    timestamp: EpochTimestamp = None


class SystemEvent(IEXModel):
    system_event: str = ""
    timestamp: EpochTimestamp = None


class Book(IEXModel):
    """Quote, bids, asks and trades for a symbol."""
    quote: Optional[Quote] = None
    bids: List[BidAsk] = []
    asks: List[BidAsk] = []
    trades: List[Trade] = []
    system_event: Optional[SystemEvent] = None


class EffectiveSpread(IEXModel):
    volume: Optional[int] = None
    venue: str = ""
    venue_name: str = ""
    effective_spread: Optional[float] = None
    effective_quoted: Optional[float] = None
    price_improvement: Optional[float] = None


class VenueVolume(IEXModel):
    """Delayed and 30 day average consolidated volume by market."""
    volume: Optional[int] = None
    venue: str = ""
    venue_name: str = ""
    date: Optional[CalendarDate] = None
    market_percent: Optional[float] = None
    avg_market_percent: Optional[float] = None


# ---------------------------------------------------------------------------
# Market info
# ---------------------------------------------------------------------------

class Market(IEXModel):
    """Real time traded volume on a U.S. market."""
    mic: str = ""
    tape_id: str = ""
    venue: str = Field("", alias="venueName")
    volume: Optional[int] = None
    tape_a: Optional[int] = None
    tape_b: Optional[int] = None
    tape_c: Optional[int] = None
    percent: Optional[float] = Field(None, alias="marketPercent")
    last_updated: EpochTimestamp = None


class SectorPerformance(IEXModel):
    sector: str = ""
    name: str = ""
    performance: Optional[float] = None
    last_updated: EpochTimestamp = None


class News(IEXModel):
    time: EpochTimestamp = Field(None, alias="datetime")
    headline: str = ""
    source: str = ""
    url: str = ""
    summary: str = ""
    related: str = ""
    image: str = ""
    language: str = Field("", alias="lang")
    has_paywall: bool = False


# ---------------------------------------------------------------------------
# Stock fundamentals
# ---------------------------------------------------------------------------

class BalanceSheet(IEXModel):
    report_date: Optional[CalendarDate] = None
    filing_type: str = ""
    fiscal_date: Optional[CalendarDate] = None
    fiscal_quarter: Optional[int] = None
    fiscal_year: Optional[int] = None
    currency: str = ""
    current_cash: Optional[float] = None
    short_term_investments: Optional[float] = None
    receivables: Optional[float] = None
    inventory: Optional[float] = None
    other_current_assets: Optional[float] = None
    current_assets: Optional[float] = None
    long_term_investments: Optional[float] = None
    property_plant_equipment: Optional[float] = None
    goodwill: Optional[float] = None
    intangible_assets: Optional[float] = None
    other_assets: Optional[float] = None
    total_assets: Optional[float] = None
    accounts_payable: Optional[float] = None
    current_long_term_debt: Optional[float] = None
    other_current_liabilities: Optional[float] = None
    total_current_liabilities: Optional[float] = None
    long_term_debt: Optional[float] = None
    other_liabilities: Optional[float] = None
    minority_interest: Optional[float] = None
    total_liabilities: Optional[float] = None
    common_stock: Optional[float] = None
    retained_earnings: Optional[float] = None
    treasury_stock: Optional[float] = None
    capital_surplus: Optional[float] = None
    shareholder_equity: Optional[float] = None
    net_tangible_assets: Optional[float] = None
    updated: EpochTimestamp = None


class BalanceSheets(IEXModel):
    symbol: str = ""
    statements: List[BalanceSheet] = Field([], alias="balancesheet")


class CashFlow(IEXModel):
    report_date: Optional[CalendarDate] = None
    fiscal_date: Optional[CalendarDate] = None
    currency: str = ""
    net_income: Optional[float] = None
    depreciation: Optional[float] = None
    changes_in_receivables: Optional[float] = None
    changes_in_inventories: Optional[float] = None
    cash_change: Optional[float] = None
    cash_flow: Optional[float] = None
    capital_expenditures: Optional[float] = None
    investments: Optional[float] = None
    investing_activity_other: Optional[float] = None
    total_investing_cash_flows: Optional[float] = None
    dividends_paid: Optional[float] = None
    net_borrowings: Optional[float] = None
    other_financing_cash_flows: Optional[float] = None
    cash_flow_financing: Optional[float] = None
    exchange_rate_effect: Optional[float] = None


class CashFlows(IEXModel):
    symbol: str = ""
    statements: List[CashFlow] = Field([], alias="cashflow")


class IncomeStatement(IEXModel):
    report_date: Optional[CalendarDate] = None
    fiscal_date: Optional[CalendarDate] = None
    currency: str = ""
    total_revenue: Optional[float] = None
    cost_of_revenue: Optional[float] = None
    gross_profit: Optional[float] = None
    research_and_development: Optional[float] = None
    selling_general_and_admin: Optional[float] = None
    operating_expense: Optional[float] = None
    operating_income: Optional[float] = None
    other_income_expense_net: Optional[float] = None
    ebit: Optional[float] = None
    interest_income: Optional[float] = None
    pretax_income: Optional[float] = None
    income_tax: Optional[float] = None
    minority_interest: Optional[float] = None
    net_income: Optional[float] = None
    net_income_basic: Optional[float] = None


class IncomeStatements(IEXModel):
    symbol: str = ""
    statements: List[IncomeStatement] = Field([], alias="income")


class Financial(IEXModel):
    report_date: Optional[CalendarDate] = None
    gross_profit: Optional[float] = None
    cost_of_revenue: Optional[float] = None
    operating_revenue: Optional[float] = None
    total_revenue: Optional[float] = None
    operating_income: Optional[float] = None
    net_income: Optional[float] = None
    research_and_development: Optional[float] = None
    operating_expense: Optional[float] = None
    current_assets: Optional[float] = None
    total_assets: Optional[float] = None
    total_liabilities: Optional[float] = None
    current_cash: Optional[float] = None
    current_debt: Optional[float] = None
    short_term_debt: Optional[float] = None
    long_term_debt: Optional[float] = None
    total_cash: Optional[float] = None
    total_debt: Optional[float] = None
    shareholder_equity: Optional[float] = None
    cash_change: Optional[float] = None
    cash_flow: Optional[float] = None
    operating_gains_losses: Optional[float] = None


class Financials(IEXModel):
    symbol: str = ""
    financials: List[Financial] = []


class Dividend(IEXModel):
    ex_date: Optional[CalendarDate] = None
    payment_date: Optional[CalendarDate] = None
    record_date: Optional[CalendarDate] = None
    declared_date: Optional[CalendarDate] = None
    amount: Optional[float] = None
    flag: str = ""
    currency: str = ""
    description: str = ""
    frequency: str = ""


class Split(IEXModel):
    ex_date: Optional[CalendarDate] = None
    declared_date: Optional[CalendarDate] = None
    ratio: Optional[float] = None
    from_factor: Optional[float] = None
    to_factor: Optional[float] = None
    description: str = ""


class Earning(IEXModel):
    """Earnings for one fiscal period."""
    actual_eps: Optional[float] = Field(None, alias="actualEPS")
    consensus_eps: Optional[float] = Field(None, alias="consensusEPS")
    announce_time: AnnounceTimeField = Field(AnnounceTime.BLANK, alias="announcetime")
    number_of_estimates: Optional[int] = None
    eps_surprise_dollar: Optional[float] = Field(None, alias="EPSSurpriseDollar")
    eps_report_date: Optional[CalendarDate] = Field(None, alias="EPSReportDate")
    fiscal_period: str = ""
    fiscal_end_date: Optional[CalendarDate] = None
    year_ago: Optional[float] = None
    year_ago_change_percent: Optional[float] = None


class Earnings(IEXModel):
    symbol: str = ""
    earnings: List[Earning] = []


class TodayEarning(IEXModel):
    consensus_eps: Optional[float] = Field(None, alias="consensusEPS")
    announce_time: AnnounceTimeField = Field(AnnounceTime.BLANK, alias="announcetime")
    number_of_estimates: Optional[int] = None
    fiscal_period: str = ""
    fiscal_end_date: Optional[CalendarDate] = None
    symbol: str = ""
    symbol_id: Optional[int] = None
    quote: Optional[Quote] = None
    headline: str = ""
    estimated_change_percent: Optional[float] = None


class EarningsToday(IEXModel):
    """Earnings reported today, grouped by announce time."""
    before_open: List[TodayEarning] = Field([], alias="bto")
    after_close: List[TodayEarning] = Field([], alias="amc")
    during_trading: List[TodayEarning] = Field([], alias="other")


class KeyStats(IEXModel):
    name: str = Field("", alias="companyName")
    market_cap: Optional[float] = None
    week52_high: Optional[float] = None
    week52_low: Optional[float] = None
    week52_change: Optional[float] = None
    shares_outstanding: Optional[float] = None
    avg30_volume: Optional[float] = None
    avg10_volume: Optional[float] = None
    float_shares: Optional[float] = Field(None, alias="float")
    employees: Optional[int] = None
    ttm_eps: Optional[float] = Field(None, alias="ttmEPS")
    ttm_dividend_rate: Optional[float] = None
    dividend_yield: Optional[float] = None
    next_dividend_date: Optional[CalendarDate] = None
    ex_dividend_date: Optional[CalendarDate] = None
    next_earnings_date: Optional[CalendarDate] = None
    pe_ratio: Optional[float] = None
    beta: Optional[float] = None
    day200_moving_avg: Optional[float] = None
    day50_moving_avg: Optional[float] = None
    max_change_percent: Optional[float] = None
    year5_change_percent: Optional[float] = None
    year2_change_percent: Optional[float] = None
    year1_change_percent: Optional[float] = None
    ytd_change_percent: Optional[float] = None
    month6_change_percent: Optional[float] = None
    month3_change_percent: Optional[float] = None
    month1_change_percent: Optional[float] = None
    day30_change_percent: Optional[float] = None
    day5_change_percent: Optional[float] = None


class AdvancedStats(KeyStats):
    """Key stats plus EBITDA, ratios and other key financial data."""
    total_cash: Optional[float] = None
    current_debt: Optional[float] = None
    revenue: Optional[float] = None
    gross_profit: Optional[float] = None
    total_revenue: Optional[float] = None
    ebitda: Optional[float] = Field(None, alias="EBITDA")
    revenue_per_share: Optional[float] = None
    debt_to_equity: Optional[float] = None
    profit_margin: Optional[float] = None
    enterprise_value: Optional[float] = None
    enterprise_value_to_revenue: Optional[float] = None
    price_to_sales: Optional[float] = None
    price_to_book: Optional[float] = None
    forward_pe_ratio: Optional[float] = Field(None, alias="forwardPERatio")
    peg_ratio: Optional[float] = None


# ---------------------------------------------------------------------------
# Stock research
# ---------------------------------------------------------------------------

class Estimate(IEXModel):
    consensus_eps: Optional[float] = Field(None, alias="consensusEPS")
    number_of_estimates: Optional[int] = None
    fiscal_period: str = ""
    fiscal_end_date: Optional[CalendarDate] = None
    report_date: Optional[CalendarDate] = None


class Estimates(IEXModel):
    symbol: str = ""
    estimates: List[Estimate] = []


class PriceTarget(IEXModel):
    """Latest average, high and low analyst price target."""
    symbol: str = ""
    updated_date: Optional[CalendarDate] = None
    average: Optional[float] = Field(None, alias="priceTargetAverage")
    high: Optional[float] = Field(None, alias="priceTargetHigh")
    low: Optional[float] = Field(None, alias="priceTargetLow")
    num_analysts: Optional[int] = Field(None, alias="numberOfAnalysts")
    currency: str = ""


class Recommendation(IEXModel):
    consensus_end_date: EpochTimestamp = None
    consensus_start_date: EpochTimestamp = None
    buy_ratings: Optional[int] = Field(None, alias="ratingBuy")
    hold_ratings: Optional[int] = Field(None, alias="ratingHold")
    no_ratings: Optional[int] = Field(None, alias="ratingNone")
    overweight_ratings: Optional[int] = Field(None, alias="ratingOverweight")
    sell_ratings: Optional[int] = Field(None, alias="ratingSell")
    underweight_ratings: Optional[int] = Field(None, alias="ratingUnderweight")
    consensus_rating: Optional[float] = Field(None, alias="ratingScaleMark")


class FundOwner(IEXModel):
    adjusted_holding: Optional[float] = Field(None, alias="adjHolding")
    adjusted_market_value: Optional[float] = Field(None, alias="adjMv")
    name: str = Field("", alias="entityProperName")
    report_date: EpochTimestamp = None
    reported_holding: Optional[float] = None
    reported_market_value: Optional[float] = Field(None, alias="reportedMv")


class InstitutionalOwner(IEXModel):
    entity_name: str = Field("", alias="entityProperName")
    adjusted_holding: Optional[float] = Field(None, alias="adjHolding")
    adjusted_market_value: Optional[float] = Field(None, alias="adjMv")
    report_date: EpochTimestamp = None
    reported_holding: Optional[float] = None


# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------

class TradedSymbol(IEXModel):
    symbol: str = ""
    date: Optional[CalendarDate] = None
    is_enabled: bool = False


class Symbol(TradedSymbol):
    name: str = ""
    type: str = ""
    iex_id: str = ""
    region: str = ""
    currency: str = ""
    exchange: str = ""


class OTCSymbol(IEXModel):
    symbol: str = ""
    name: str = ""
    date: Optional[CalendarDate] = None
    type: str = ""
    iex_id: str = ""


class CryptoSymbol(IEXModel):
    symbol: str = ""
    name: str = ""
    date: Optional[CalendarDate] = None
    is_enabled: bool = False
    type: str = ""
    iex_id: str = ""


class USExchange(IEXModel):
    name: str = ""
    mic: str = ""
    tape_id: str = ""
    oats_id: str = ""
    type: str = ""


class Sector(IEXModel):
    name: str = ""


class Tag(IEXModel):
    name: str = ""


class TradeHolidayDate(IEXModel):
    date: Optional[CalendarDate] = None
    settlement_date: Optional[CalendarDate] = None


class Currency(IEXModel):
    code: str = ""
    name: str = ""


class CurrencyPair(IEXModel):
    from_currency: str = ""
    to_currency: str = ""


class FXSymbols(IEXModel):
    currencies: List[Currency] = []
    pairs: List[CurrencyPair] = []


# ---------------------------------------------------------------------------
# Forex, crypto & IEX market data
# ---------------------------------------------------------------------------

class ExchangeRate(IEXModel):
    """End of day exchange rate of a currency pair."""
    date: Optional[CalendarDate] = None
    from_currency: str = ""
    to_currency: str = ""
    rate: Optional[float] = None


class CryptoQuote(Quote):
    """Quote for a cryptocurrency symbol."""
    primary_exchange: str = ""
    sector: str = ""
    latest_volume: Optional[float] = None
    bid_price: Optional[float] = None
    bid_size: Optional[float] = None
    ask_price: Optional[float] = None
    ask_size: Optional[float] = None


class TOPS(IEXModel):
    """Top of book quotation from IEX."""
    symbol: str = ""
    market_percent: Optional[float] = None
    bid_size: Optional[int] = None
    bid_price: Optional[float] = None
    ask_size: Optional[int] = None
    ask_price: Optional[float] = None
    volume: Optional[int] = None
    last_sale_price: Optional[float] = None
    last_sale_size: Optional[int] = None
    last_sale_time: EpochTimestamp = None
    last_updated: EpochTimestamp = None
    sector: str = ""
    security_type: str = ""


class Last(IEXModel):
    """IEX last sale price, size and time."""
    symbol: str = ""
    price: Optional[float] = None
    size: Optional[int] = None
    time: EpochTimestamp = None


class SecurityEvent(IEXModel):
    security_event: str = ""
    timestamp: EpochTimestamp = None


class TradingStatus(IEXModel):
    status: str = ""
    reason: str = ""
    timestamp: EpochTimestamp = None


class OpHaltStatus(IEXModel):
    is_halted: bool = False
    timestamp: EpochTimestamp = None


class SSRStatus(IEXModel):
    """Short sale price test status."""
    is_ssr: bool = Field(False, alias="isSSR")
    detail: str = ""
    timestamp: EpochTimestamp = None


class DEEP(IEXModel):
    """Depth of book, trades and status events for one symbol on IEX."""
    symbol: str = ""
    market_percent: Optional[float] = None
    volume: Optional[int] = None
    last_sale_price: Optional[float] = None
    last_sale_size: Optional[int] = None
    last_sale_time: EpochTimestamp = None
    last_updated: EpochTimestamp = None
    bids: List[BidAsk] = []
    asks: List[BidAsk] = []
    system_event: Optional[SystemEvent] = None
    trading_status: Optional[TradingStatus] = None
    op_halt_status: Optional[OpHaltStatus] = None
    ssr_status: Optional[SSRStatus] = None
    security_event: Optional[SecurityEvent] = None
    trades: List[Trade] = []
    trade_breaks: List[Trade] = []


class DEEPBook(IEXModel):
    bids: List[BidAsk] = []
    asks: List[BidAsk] = []


class StatValue(IEXModel):
    value: Optional[float] = None
    last_updated: EpochTimestamp = None


class IntradayStats(IEXModel):
    """IEX market-wide statistics for the current day."""
    volume: Optional[StatValue] = None
    symbols_traded: Optional[StatValue] = None
    routed_volume: Optional[StatValue] = None
    notional: Optional[StatValue] = None
    market_share: Optional[StatValue] = None


# ---------------------------------------------------------------------------
# Request options
# ---------------------------------------------------------------------------

class _ChartOptions(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_params(self) -> Dict[str, str]:
        """Query params for the set options; false and zero values are omitted."""
        params = {}
        for key, value in self.model_dump(by_alias=True).items():
            if not value:
                continue
            params[key] = str(value).lower() if isinstance(value, bool) else str(value)
        return params


class HistoricalOptions(_ChartOptions):
    """Optional query params for the historical prices endpoints."""
    chart_close_only: bool = False
    chart_simplify: bool = False
    chart_interval: int = 0
    change_from_close: bool = False
    chart_last: int = 0


class IntradayHistoricalOptions(_ChartOptions):
    """Optional query params for the intraday historical prices endpoints."""
    chart_iex_only: bool = Field(False, alias="chartIEXOnly")
    chart_reset: bool = False
    chart_simplify: bool = False
    chart_interval: int = 0
    change_from_close: bool = False
    chart_last: int = 0
