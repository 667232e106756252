"""rpquery CLI - Main entry point."""

import logging

import click

from rpquery import __version__

_LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def _setup_logging(verbose: bool) -> None:
    """Configure a console handler on the root logger."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, logging.StreamHandler) for h in root_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root_logger.addHandler(handler)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group()
@click.version_option(version=__version__, prog_name="rpquery")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with url, project and token",
)
@click.option("--url", help="Server base URL (e.g. https://rp.example.com)")
@click.option("--project", help="Project name")
@click.option("--token", help="User API token")
@click.option("--timeout", type=float, help="Request timeout in seconds")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_path, url, project, token, timeout, verbose):
    """rpquery - query launches on a ReportPortal server."""
    _setup_logging(verbose)
    ctx.obj = {
        "config_path": config_path,
        "overrides": {"url": url, "project": project, "token": token, "timeout": timeout},
    }


from .filter_commands import filters  # noqa: E402
from .launch_commands import launches  # noqa: E402

cli.add_command(launches)
cli.add_command(filters)


if __name__ == "__main__":
    cli()
