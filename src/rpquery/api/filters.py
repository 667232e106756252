"""Translation of saved filters into launch query parameters."""

from .models import Filter, FilterOrder


def sort_direction(ascending: bool) -> str:
    return "ASC" if ascending else "DESC"


def sort_param(order: FilterOrder) -> str:
    """Format an order as ``<column>,<ASC|DESC>``."""
    return f"{order.sorting_column},{sort_direction(order.ascending)}"


def to_query_params(filter: Filter) -> dict[str, str]:
    """Convert a saved filter to the query parameters the server expects.

    Each entity becomes ``filter.<condition>.<field>``. Stored selection
    adds ``page.page`` (when not the first page) and ``page.sort``.
    Repeated keys and multiple orders are resolved last-write-wins, so
    only the final order in the list ends up in ``page.sort``.

    Field and condition tokens are passed through unchecked.

    Args:
        filter: Filter as returned by the filter endpoint.

    Returns:
        Flat mapping of query parameter names to values.
    """
    params: dict[str, str] = {}
    for entity in filter.entities:
        params[f"filter.{entity.condition}.{entity.field}"] = entity.value

    selection = filter.selection
    if selection is not None:
        if selection.page_number != 0:
            params["page.page"] = str(selection.page_number)
        for order in selection.orders:
            params["page.sort"] = sort_param(order)

    return params
