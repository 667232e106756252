"""Typed client for the ReportPortal REST API.

This package holds the request/response layer (``ApiClient``), the resource
models, the saved-filter to query-parameter translation and the timestamp
codec shared by all timestamp fields.
"""

from .client import ApiClient
from .errors import (
    DecodeError,
    FilterNotFoundError,
    HTTPStatusError,
    NotFoundError,
    RPClientError,
    TimestampFormatError,
    TransportError,
)
from .filters import to_query_params
from .models import Filter, FilterEntity, FilterOrder, Launch, LaunchMode, Page, SelectionParams
from .timestamp import Timestamp, decode_timestamp, encode_timestamp

__all__ = [
    "ApiClient",
    "DecodeError",
    "Filter",
    "FilterEntity",
    "FilterNotFoundError",
    "FilterOrder",
    "HTTPStatusError",
    "Launch",
    "LaunchMode",
    "NotFoundError",
    "Page",
    "RPClientError",
    "SelectionParams",
    "Timestamp",
    "TimestampFormatError",
    "TransportError",
    "decode_timestamp",
    "encode_timestamp",
    "to_query_params",
]
