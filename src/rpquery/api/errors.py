"""Exception types raised by the ReportPortal API client."""

_SNIPPET_LIMIT = 200


def _snippet(payload: bytes | str) -> str:
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8", errors="replace")
    if len(payload) > _SNIPPET_LIMIT:
        return payload[: _SNIPPET_LIMIT - 3] + "..."
    return payload


class RPClientError(Exception):
    """Base class for every error raised by rpquery."""


class TransportError(RPClientError):
    """Raised when no HTTP status could be obtained (DNS, refused, timeout)."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause}")


class HTTPStatusError(RPClientError):
    """Raised for any response with a 4xx or 5xx status.

    Attributes:
        status_code: HTTP status returned by the server.
        body: Raw response body. No particular error schema is assumed.
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"status code error: {status_code}\n{body}")


class DecodeError(RPClientError):
    """Raised when a response body is not valid JSON or has the wrong shape."""

    def __init__(self, message: str, payload: bytes | str = b"") -> None:
        self.snippet = _snippet(payload)
        super().__init__(f"{message} (payload: {self.snippet!r})")


class TimestampFormatError(RPClientError, ValueError):
    """Raised when text is neither epoch milliseconds nor the fixed layout."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Unrecognized timestamp: {text!r}")


class NotFoundError(RPClientError):
    """Raised when a lookup by name matched nothing on the server."""


class FilterNotFoundError(NotFoundError):
    """Raised when no saved filter carries the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"no filter {name} found")
