"""rpquery filters - Saved filter commands."""

import click
from rich.markup import escape
from rich.table import Table

from rpquery.api.errors import FilterNotFoundError, RPClientError
from rpquery.api.filters import to_query_params
from rpquery.launches import LaunchQueryService

from .connection import console, fail, open_client


@click.group()
def filters():
    """Inspect saved filters."""


@filters.command("show")
@click.argument("name")
@click.pass_context
def show_filter(ctx, name):
    """Show the query parameters a saved filter translates to."""
    with open_client(ctx) as client:
        try:
            page = LaunchQueryService(client).get_filters_by_name(name)
            if not page.content:
                raise FilterNotFoundError(name)
        except RPClientError as e:
            fail(str(e))

    saved = page.content[0]
    table = Table(title=f"Filter '{escape(saved.name)}' (owner: {escape(saved.owner) or '-'})")
    table.add_column("Parameter")
    table.add_column("Value")
    for key, value in to_query_params(saved).items():
        table.add_row(escape(key), escape(value))
    console.print(table)
