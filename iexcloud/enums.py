"""
Enumerated string codes used by IEX Cloud.

Each enum member's value is its wire code and each member carries a
human-readable description, so the code -> member, member -> code and
member -> description mappings are defined in one place.
"""

import json
from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator

from iexcloud.codecs import DecodeError


class CodeEnum(str, Enum):
    """
    Base for closed sets of IEX string codes.

    Subclasses declare members as ``NAME = (code, description)`` and may set
    ``_aliases`` (extra wire code -> canonical code) and ``_domain`` /
    ``_field`` for error messages.
    """

    def __new__(cls, code: str, description: str):
        obj = str.__new__(cls, code)
        obj._value_ = code
        obj.description = description
        return obj

    @classmethod
    def _missing_(cls, value):
        aliases = getattr(cls, "_aliases", None)
        if isinstance(aliases, dict) and value in aliases:
            return cls(aliases[value])
        return None

    @classmethod
    def domain(cls) -> str:
        return getattr(cls, "_domain", cls.__name__)

    @classmethod
    def from_code(cls, code: str) -> "CodeEnum":
        """Look up a member by wire code; unknown codes raise DecodeError."""
        try:
            return cls(code)
        except ValueError:
            raise DecodeError(f"invalid {cls.domain()} {json.dumps(code)}") from None

    @classmethod
    def decode(cls, value: Any) -> "CodeEnum":
        """Decode a JSON value, which must be a string code."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            field = getattr(cls, "_field", cls.__name__)
            raise DecodeError(f"{field} should be a string, got {json.dumps(value)}")
        return cls.from_code(value)

    @property
    def code(self) -> str:
        """The canonical wire code."""
        return self._value_

    def __str__(self) -> str:
        return self.description


class IssueType(CodeEnum):
    BLANK = ("", "Not available")
    ADR = ("ad", "American Depository Receipt (ADR)")
    REIT = ("re", "Real Estate Investment Trust (REIT)")
    CLOSED_END_FUND = ("ce", "Closed end fund (Stock and Bond Fund)")
    SECONDARY_ISSUE = ("si", "Secondary Issue")
    LIMITED_PARTNERSHIP = ("lp", "Limited Partnership")
    COMMON_STOCK = ("cs", "Common Stock")
    ETF = ("et", "Exchange Traded Fund (ETF)")
    WARRANT = ("wt", "Warrant")
    RIGHT = ("rt", "Right")
    UNIT = ("ut", "Unit")
    TEMPORARY = ("temp", "Temporary")


IssueType._aliases = {"cef": "ce"}
IssueType._domain = "issue type"
IssueType._field = "issueType"


class AnnounceTime(CodeEnum):
    BLANK = ("", "Not available")
    BEFORE_OPEN = ("BTO", "Before open")
    DURING_TRADING = ("DMT", "During trading")
    AFTER_CLOSE = ("AMC", "After close")


AnnounceTime._domain = "announce time"
AnnounceTime._field = "announceTime"


class PathRange(CodeEnum):
    """Date range used in the path of an endpoint (e.g. dividends, splits)."""
    NEXT = ("next", "Next upcoming")
    ONE_MONTH = ("1m", "One month (default)")
    THREE_MONTHS = ("3m", "Three months")
    SIX_MONTHS = ("6m", "Six months")
    ONE_YEAR = ("1y", "One year")
    TWO_YEARS = ("2y", "Two years")
    FIVE_YEARS = ("5y", "Five years")
    YTD = ("ytd", "Year-to-date")


PathRange._domain = "path range"
PathRange._field = "pathRange"


class HistoricalTimeFrame(CodeEnum):
    """Time frame for historically adjusted market-wide data."""
    ONE_MONTH = ("1m", "One month (default)")
    THREE_MONTHS = ("3m", "Three months")
    SIX_MONTHS = ("6m", "Six months")
    ONE_YEAR = ("1y", "One year")
    TWO_YEARS = ("2y", "Two years")
    FIVE_YEARS = ("5y", "Five years")
    YTD = ("ytd", "Year-to-date")
    MAX = ("max", "All available data up to 15 years")


HistoricalTimeFrame._domain = "historical time frame"
HistoricalTimeFrame._field = "timeframe"


class Period(CodeEnum):
    """Reporting period for financial statements."""
    ANNUAL = ("annual", "Annual")
    QUARTER = ("quarter", "Quarterly")


Period._domain = "period"
Period._field = "period"


# ---------------------------------------------------------------------------
# Annotated field types for response models
# ---------------------------------------------------------------------------

IssueTypeField = Annotated[IssueType, BeforeValidator(IssueType.decode)]
AnnounceTimeField = Annotated[AnnounceTime, BeforeValidator(AnnounceTime.decode)]
PathRangeField = Annotated[PathRange, BeforeValidator(PathRange.decode)]
