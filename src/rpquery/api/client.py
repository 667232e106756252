"""HTTP client for the ReportPortal REST API.

ApiClient owns a single pooled ``httpx.Client`` configured with the server
URL, the project name and a bearer token. It performs GET requests against
templated project paths, turns 4xx/5xx responses into HTTPStatusError
before anything is decoded, and validates JSON bodies into pydantic models.
"""

import logging
import re
from collections.abc import Mapping
from typing import TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from rpquery.config.models import ConnectionConfig

from .errors import DecodeError, HTTPStatusError, TransportError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

QueryParams = Mapping[str, str] | str

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


class ApiClient:
    """Authenticated client bound to one server and project.

    The instance carries no per-call state and may be shared between
    threads. Close it (or use it as a context manager) to release pooled
    connections; closing also aborts the use of the client for further
    requests.
    """

    def __init__(
        self,
        base_url: str,
        project: str,
        token: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("Server URL is required")
        if not project:
            raise ValueError("Project name is required")
        if not token:
            raise ValueError("API token is required")

        self._base_url = base_url.rstrip("/")
        self._project = project
        self._headers: dict[str, str] = {
            "Accept": "application/json",
            "Authorization": f"Bearer {token}",
        }
        self._http = httpx.Client(
            base_url=self._base_url,
            headers=self._headers,
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls,
        config: ConnectionConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> "ApiClient":
        """Build a client from a validated connection config."""
        return cls(
            config.base_url,
            config.project,
            config.token,
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def project(self) -> str:
        return self._project

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def expand_path(self, path: str, path_params: Mapping[str, str] | None = None) -> str:
        """Substitute ``{name}`` placeholders in a path template.

        ``project`` is always available. Values are percent-escaped so
        they stay within a single path segment.

        Raises:
            ValueError: If a placeholder has no value.
        """
        values = {"project": self._project}
        if path_params:
            values.update(path_params)

        def _replace(match: re.Match) -> str:
            name = match.group(1)
            if name not in values:
                raise ValueError(f"No value for path parameter '{name}' in {path}")
            return quote(str(values[name]), safe="")

        return _PLACEHOLDER_RE.sub(_replace, path)

    def get(
        self,
        path: str,
        path_params: Mapping[str, str] | None = None,
        params: QueryParams | None = None,
    ) -> httpx.Response:
        """Issue a GET request and classify the response status.

        Args:
            path: Path template, e.g. ``/api/v1/{project}/launch``.
            path_params: Values for placeholders other than ``project``.
            params: Query parameters as a mapping or a raw query string.

        Returns:
            The response, guaranteed to have a status below 400.

        Raises:
            TransportError: If the server could not be reached or redirects
                did not terminate.
            DecodeError: If the body fails content decoding.
            HTTPStatusError: If the status code is 4xx or 5xx.
        """
        url = self.expand_path(path, path_params)
        logger.debug(f"GET {self._base_url}{url} params={params!r}")
        try:
            response = self._http.get(url, params=params)
        except httpx.DecodingError as e:
            logger.debug(f"Undecodable body from {url}: {e}")
            raise DecodeError(
                f"Cannot decode response body from {self._base_url}{url}: {e}"
            ) from e
        except httpx.RequestError as e:
            logger.debug(f"Transport failure for {url}: {e}")
            raise TransportError(f"{self._base_url}{url}", e) from e

        if response.status_code // 100 >= 4:
            logger.debug(f"GET {url} returned {response.status_code}")
            raise HTTPStatusError(response.status_code, response.text)
        return response

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def decode(self, response: httpx.Response, model: type[M]) -> M:
        """Validate a JSON response body into ``model``.

        Unknown fields are ignored and missing optional fields get their
        defaults. Timestamp fields go through the timestamp codec, so a bad
        timestamp is reported here as well.

        Raises:
            DecodeError: If the body is not JSON or does not fit the model.
        """
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            first = e.errors()[0] if e.error_count() else {}
            location = ".".join(str(p) for p in first.get("loc", ())) or "<body>"
            message = f"Cannot decode {model.__name__} at {location}: {first.get('msg', e)}"
            raise DecodeError(message, response.content) from e

    def fetch(
        self,
        path: str,
        model: type[M],
        path_params: Mapping[str, str] | None = None,
        params: QueryParams | None = None,
    ) -> M:
        """GET ``path`` and decode the body into ``model``."""
        return self.decode(self.get(path, path_params, params), model)
