"""Resolve connection settings for CLI commands."""

from contextlib import contextmanager
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from rpquery.api.client import ApiClient
from rpquery.config.loader import ConfigError, load_connection_config, validate_config
from rpquery.config.models import ConnectionConfig

console = Console()


def resolve_config(ctx: click.Context) -> ConnectionConfig:
    """Build a ConnectionConfig from ``--config`` and the connection options.

    Options given on the command line replace the file's values.
    """
    obj = ctx.find_root().obj or {}
    overrides = obj.get("overrides", {})
    config_path = obj.get("config_path")

    if config_path:
        return load_connection_config(Path(config_path), overrides)
    return validate_config(
        {k: v for k, v in overrides.items() if v is not None},
        ConnectionConfig,
        "command line options",
    )


def fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(1)


@contextmanager
def open_client(ctx: click.Context):
    """Yield an ApiClient for the resolved configuration."""
    try:
        config = resolve_config(ctx)
    except ConfigError as e:
        fail(str(e))

    with ApiClient.from_config(config) as client:
        yield client
