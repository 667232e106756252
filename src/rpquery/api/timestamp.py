"""Timestamp wire format used by the ReportPortal API.

The server sends instants either as epoch milliseconds (a JSON number or a
numeric string) or as text in the layout ``YYYY-MM-DDTHH:mm:ss.fff±HHMM``.
Outbound values are always written as epoch milliseconds, so anything below
millisecond resolution is dropped on encode.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Annotated

from pydantic import BeforeValidator, PlainSerializer

from .errors import TimestampFormatError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_MS = timedelta(milliseconds=1)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_MILLIS_RE = re.compile(r"[+-]?\d+", re.ASCII)
_LAYOUT_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d{1,3}))?"
    r"([+-])(\d{2})(\d{2})",
    re.ASCII,
)


def _from_millis(text: str) -> datetime:
    millis = int(text)
    if not _INT64_MIN <= millis <= _INT64_MAX:
        raise TimestampFormatError(text)
    try:
        return EPOCH + millis * _ONE_MS
    except OverflowError:
        raise TimestampFormatError(text) from None


def _from_layout(match: re.Match, text: str) -> datetime:
    year, month, day, hour, minute, second, fraction, sign, off_h, off_m = match.groups()
    offset = timedelta(hours=int(off_h), minutes=int(off_m))
    if sign == "-":
        offset = -offset
    micros = int(fraction.ljust(3, "0")) * 1000 if fraction else 0
    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), micros,
            tzinfo=timezone(offset),
        )
    except ValueError:
        raise TimestampFormatError(text) from None


def decode_timestamp(raw: str | bytes | int) -> datetime:
    """Decode a wire timestamp into an aware datetime.

    Epoch milliseconds are tried first, then the fixed textual layout.

    Args:
        raw: JSON string contents, raw bytes, or an integer JSON number.
            Surrounding quotes and whitespace are ignored.

    Returns:
        Timezone-aware datetime (UTC for epoch input, the given offset for
        textual input).

    Raises:
        TimestampFormatError: If neither format matches.
    """
    if isinstance(raw, bool):
        raise TimestampFormatError(str(raw))
    if isinstance(raw, int):
        raw = str(raw)
    elif isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    elif not isinstance(raw, str):
        raise TimestampFormatError(repr(raw))

    text = raw.strip().strip('"')

    if _MILLIS_RE.fullmatch(text):
        return _from_millis(text)

    match = _LAYOUT_RE.fullmatch(text)
    if match:
        return _from_layout(match, text)

    raise TimestampFormatError(text)


def to_epoch_millis(value: datetime) -> int:
    """Milliseconds since the epoch, floored. Naive datetimes count as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // _ONE_MS


def encode_timestamp(value: datetime) -> str:
    """Encode a datetime as a decimal epoch-milliseconds string."""
    return str(to_epoch_millis(value))


def _validate(value):
    if isinstance(value, datetime):
        return value
    return decode_timestamp(value)


Timestamp = Annotated[
    datetime,
    BeforeValidator(_validate),
    PlainSerializer(to_epoch_millis, return_type=int, when_used="json"),
]
