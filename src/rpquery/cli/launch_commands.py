"""rpquery launches - Launch query commands."""

import click
from rich.markup import escape
from rich.table import Table

from rpquery.api.errors import RPClientError
from rpquery.api.models import Launch, Page
from rpquery.launches import LaunchQueryService

from .connection import console, fail, open_client


def _parse_params(values: tuple[str, ...]) -> dict[str, str]:
    params: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected key=value, got '{item}'", param_hint="--param")
        params[key] = value
    return params


def _failed_count(launch: Launch) -> str:
    if launch.statistics is None:
        return "-"
    return str(launch.statistics.executions.failed)


def _render_table(page: Page[Launch]) -> None:
    table = Table(title="Launches")
    table.add_column("Number", justify="right")
    table.add_column("Name")
    table.add_column("Status")
    table.add_column("Started")
    table.add_column("Failed", justify="right")

    for launch in page.content:
        status = launch.status
        if status == "PASSED":
            status = f"[green]{status}[/green]"
        elif status == "FAILED":
            status = f"[red]{status}[/red]"
        started = launch.start_time.strftime("%Y-%m-%d %H:%M:%S") if launch.start_time else "-"
        table.add_row(str(launch.number), escape(launch.name), status, started, _failed_count(launch))

    console.print(table)
    console.print(
        f"Page {page.page_number} of {page.total_pages} "
        f"({page.total_elements} launches total)"
    )


@click.group()
def launches():
    """Query launches of the configured project."""


@launches.command("list")
@click.option("--filter-name", "-n", help="Name of a saved filter to apply")
@click.option("--filter", "query", help="Raw query string, e.g. 'filter.eq.status=FAILED'")
@click.option("--param", "-p", multiple=True, help="Query parameter as key=value (repeatable)")
@click.option("--format", "fmt", type=click.Choice(["table", "json"]), default="table")
@click.pass_context
def list_launches(ctx, filter_name, query, param, fmt):
    """List launches, optionally narrowed by a filter."""
    selected = [bool(filter_name), bool(query), bool(param)]
    if sum(selected) > 1:
        raise click.UsageError("Use only one of --filter-name, --filter and --param")
    params = _parse_params(param)

    with open_client(ctx) as client:
        service = LaunchQueryService(client)
        try:
            if filter_name:
                page = service.list_by_filter_name(filter_name)
            elif query:
                page = service.list_by_filter(query)
            elif params:
                page = service.list_by_filter(params)
            else:
                page = service.list_all()
        except RPClientError as e:
            fail(str(e))

    if fmt == "json":
        click.echo(page.model_dump_json(by_alias=True, indent=2))
        return

    if not page.content:
        console.print("[yellow]No launches found[/yellow]")
        return
    _render_table(page)
