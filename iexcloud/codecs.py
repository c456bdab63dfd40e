"""
Scalar codecs for IEX Cloud JSON payloads.

IEX Cloud encodes a few scalars in ways plain JSON decoding can't handle:
date-only strings, epoch milliseconds with a "-1" sentinel, and "H:MM"
clock strings. Each codec is a parse/format pair bundled into an
``Annotated`` pydantic type, so response models can use them as ordinary
field annotations.

The module also holds the decode/encode boundary used by the client: raw
response bytes in, validated models out. Encoding writes epoch times as
Unix seconds, not the milliseconds IEX sends.
"""

import datetime
import json
import logging
import re
from functools import lru_cache
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

DATE_LAYOUT = re.compile(r"^(\d{4})-(\d{2})-(\d{2})\Z", re.ASCII)
CLOCK_PART = re.compile(r"^\d+\Z", re.ASCII)

# Placeholder IEX data gets when the wire date is "" (unknown).
SENTINEL_DATE = datetime.date(1929, 10, 24)

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

# Per the IEX docs: -1 means the symbol has not been quoted today.
NOT_QUOTED = -1


class DecodeError(ValueError):
    """Raised when a wire value cannot be converted to its Python type."""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []


def _raw(value: Any) -> str:
    """Render a value the way it appeared on the wire, for error messages."""
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


# ---------------------------------------------------------------------------
# Calendar date
# ---------------------------------------------------------------------------

def parse_calendar_date(value: Any) -> datetime.date:
    """
    Decode a ``YYYY-MM-DD`` wire string into a date.

    An empty string decodes to SENTINEL_DATE instead of failing.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str):
        raise DecodeError(f"date should be a string, got {_raw(value)}")

    text = value or SENTINEL_DATE.isoformat()
    match = DATE_LAYOUT.match(text)
    if not match:
        raise DecodeError(
            f"error converting {_raw(value)} to date: does not match layout YYYY-MM-DD"
        )
    year, month, day = (int(g) for g in match.groups())
    try:
        return datetime.date(year, month, day)
    except ValueError as e:
        raise DecodeError(f"error converting {_raw(value)} to date: {e}") from e


def format_calendar_date(value: datetime.date) -> str:
    """Encode a date as ``YYYY-MM-DD``."""
    return value.isoformat()


CalendarDate = Annotated[
    datetime.date,
    BeforeValidator(parse_calendar_date),
    PlainSerializer(format_calendar_date, return_type=str, when_used="json"),
]


# ---------------------------------------------------------------------------
# Epoch timestamp
# ---------------------------------------------------------------------------

def parse_epoch_millis(value: Any) -> Optional[datetime.datetime]:
    """
    Decode epoch milliseconds into a UTC datetime truncated to the second.

    ``null`` and ``-1`` decode to None (not quoted / not available).
    Sub-second precision is dropped, not rounded.
    """
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(
            f"error converting {_raw(value)} to epoch time: expected an integer"
        )
    if value == NOT_QUOTED:
        return None
    try:
        return EPOCH + datetime.timedelta(seconds=value // 1000)
    except OverflowError as e:
        raise DecodeError(f"error converting {_raw(value)} to epoch time: {e}") from e


def format_epoch_seconds(value: datetime.datetime) -> int:
    """
    Encode a datetime as Unix seconds.

    Decoding reads milliseconds, so decode(encode(t)) does not give back t.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return (value - EPOCH) // datetime.timedelta(seconds=1)


EpochTimestamp = Annotated[
    Optional[datetime.datetime],
    BeforeValidator(parse_epoch_millis),
    PlainSerializer(format_epoch_seconds, return_type=int, when_used="json-unless-none"),
]


# ---------------------------------------------------------------------------
# Clock of day
# ---------------------------------------------------------------------------

def parse_clock(value: Any) -> datetime.timedelta:
    """
    Decode an ``H:MM`` / ``HH:MM`` wire string into time since midnight.

    An empty string decodes to ``00:00``.
    """
    if isinstance(value, datetime.timedelta):
        return value
    if not isinstance(value, str):
        raise DecodeError(f"clock should be a string, got {_raw(value)}")

    text = value or "00:00"
    parts = text.split(":")
    if len(parts) != 2:
        raise DecodeError(
            f"error converting {_raw(value)} to clock: expected 2 parts, got {len(parts)}"
        )
    for part in parts:
        if not CLOCK_PART.match(part):
            raise DecodeError(
                f"error converting {_raw(value)} to clock: invalid number {_raw(part)}"
            )
    hours, minutes = int(parts[0]), int(parts[1])
    try:
        return datetime.timedelta(minutes=hours * 60 + minutes)
    except OverflowError as e:
        raise DecodeError(f"error converting {_raw(value)} to clock: {e}") from e


def format_clock(value: datetime.timedelta) -> str:
    """Encode time since midnight as ``H:MM``."""
    total = int(value.total_seconds()) // 60
    return f"{total // 60}:{total % 60:02d}"


ClockOfDay = Annotated[
    datetime.timedelta,
    BeforeValidator(parse_clock),
    PlainSerializer(format_clock, return_type=str, when_used="json"),
]


# ---------------------------------------------------------------------------
# Decode / encode boundary
# ---------------------------------------------------------------------------

@lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def decode(type_: Any, raw: bytes | str) -> Any:
    """
    Decode a raw JSON document into ``type_``.

    Args:
        type_: A response model or a container of models (e.g. ``list[Quote]``)
        raw: The JSON body as bytes or text

    Returns:
        The validated value

    Raises:
        DecodeError: If any field fails its codec. All field errors are
            collected on ``.errors``; no partial value is returned.
    """
    try:
        return _adapter(type_).validate_json(raw)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        first = errors[0] if errors else {}
        loc = ".".join(str(p) for p in first.get("loc", ()))
        msg = first.get("msg", str(e))
        logger.debug(f"Decode of {type_} failed with {len(errors)} error(s)")
        raise DecodeError(
            f"error decoding {getattr(type_, '__name__', type_)}: {loc}: {msg}"
            + (f" (and {len(errors) - 1} more)" if len(errors) > 1 else ""),
            errors=errors,
        ) from e


def encode(value: Any, type_: Any = None) -> bytes:
    """
    Encode a value back to JSON bytes using IEX wire names.

    Args:
        value: A model instance, enum member, scalar, or container of them
        type_: Type to encode as; defaults to ``type(value)``
    """
    return _adapter(type_ if type_ is not None else type(value)).dump_json(value, by_alias=True)
