"""Launch queries: unfiltered, ad-hoc filtered, and by saved filter name."""

import logging

from rpquery.api.client import ApiClient, QueryParams
from rpquery.api.errors import FilterNotFoundError
from rpquery.api.filters import to_query_params
from rpquery.api.models import Filter, Launch, Page

logger = logging.getLogger(__name__)

LAUNCH_PATH = "/api/v1/{project}/launch"
FILTER_PATH = "/api/v1/{project}/filter"


class LaunchQueryService:
    """Query launches of the client's project.

    Every method is a blocking request/decode cycle returning a
    ``Page[Launch]``; the service keeps no state between calls.
    """

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    def list_all(self) -> Page[Launch]:
        """Retrieve the latest launches with server-side defaults."""
        return self.client.fetch(LAUNCH_PATH, Page[Launch])

    def list_by_filter(self, params: QueryParams) -> Page[Launch]:
        """Retrieve launches matching already-built query parameters.

        Args:
            params: Mapping such as ``{"filter.eq.status": "FAILED"}`` or a
                raw query string such as ``"filter.eq.status=FAILED"``.
                Sent as given.
        """
        return self.client.fetch(LAUNCH_PATH, Page[Launch], params=params)

    def get_filters_by_name(self, name: str) -> Page[Filter]:
        """Retrieve saved filters whose name equals ``name``."""
        return self.client.fetch(FILTER_PATH, Page[Filter], params={"filter.eq.name": name})

    def list_by_filter_name(self, name: str) -> Page[Launch]:
        """Retrieve launches using a saved filter looked up by name.

        When several filters share the name, the first one in server
        order is used.

        Raises:
            FilterNotFoundError: If no filter has that name. No launch
                query is issued in that case.
        """
        filters = self.get_filters_by_name(name)
        if not filters.content:
            raise FilterNotFoundError(name)

        saved = filters.content[0]
        params = to_query_params(saved)
        logger.debug(f"Resolved filter '{name}' (id={saved.id}) to {params}")
        return self.list_by_filter(params)
