"""
Typed Python client for the IEX Cloud REST API.
"""

__version__ = "0.1.0"

from iexcloud.codecs import DecodeError, decode, encode
from iexcloud.client import (
    DataNotFoundError,
    IEXCloudClient,
    ProviderError,
    RateLimitError,
    ResponseDecodeError,
)
from iexcloud.enums import AnnounceTime, HistoricalTimeFrame, IssueType, PathRange, Period
from iexcloud.models import HistoricalOptions, IntradayHistoricalOptions

__all__ = [
    "__version__",
    "AnnounceTime",
    "DataNotFoundError",
    "DecodeError",
    "HistoricalOptions",
    "HistoricalTimeFrame",
    "IEXCloudClient",
    "IntradayHistoricalOptions",
    "IssueType",
    "PathRange",
    "Period",
    "ProviderError",
    "RateLimitError",
    "ResponseDecodeError",
    "decode",
    "encode",
]
