"""Command line entry point for Kube Hoggers."""

import asyncio
import logging
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from kubehoggers.app import HoggersApp
from kubehoggers.constants import APP_DESCRIPTION, APP_NAME, KUBECONFIG_ENV_VAR
from kubehoggers.constants.defaults import STATUS_REFRESH_INTERVAL_DEFAULT
from kubehoggers.constants.enums import ViewMode
from kubehoggers.controllers import ClusterController, HoggersError
from kubehoggers.models.state.app_settings import AppSettings, ConfigError
from kubehoggers.models.state.config_manager import ConfigManager
from kubehoggers.screens.report.config import NODE_REPORT_COLUMNS, REPORT_TITLE
from kubehoggers.screens.report.presenter import ReportPresenter

logger = logging.getLogger(__name__)

app = typer.Typer(name=APP_NAME, help=APP_DESCRIPTION, no_args_is_help=True)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(log_file: Optional[Path], verbose: bool) -> None:
    """Send logs to a file; the terminal belongs to the TUI."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=str(log_file),
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(1)


def _load_settings(ctx: typer.Context, defaults: Optional[dict] = None, **overrides: Any) -> AppSettings:
    options = ctx.obj or {}
    try:
        settings = ConfigManager.load(
            options.get("config"),
            defaults=defaults,
            kubeconfig=options.get("kubeconfig"),
            **overrides,
        )
        settings.require_kubeconfig()
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        _fail(str(e))
    return settings


def _run_tui(view: ViewMode, settings: AppSettings) -> None:
    hoggers_app = HoggersApp(view, settings)
    # Mouse capture off keeps the terminal's copy and paste working
    hoggers_app.run(mouse=False)
    raise typer.Exit(hoggers_app.return_code or 0)


def _print_plain_report(settings: AppSettings) -> None:
    controller = ClusterController(
        settings.require_kubeconfig(), request_timeout=settings.request_timeout
    )
    try:
        aggregates = asyncio.run(controller.fetch_node_report())
    except HoggersError as e:
        logger.error("Node report failed: %s", e)
        _fail(str(e))

    table = Table(title=REPORT_TITLE)
    for label, _key in NODE_REPORT_COLUMNS:
        table.add_column(label)
    for row in ReportPresenter.format_rows(aggregates):
        table.add_row(*row)
    Console().print(table)


@app.callback()
def main(
    ctx: typer.Context,
    kubeconfig: Optional[str] = typer.Option(
        None,
        "--kubeconfig",
        envvar=KUBECONFIG_ENV_VAR,
        help="Path to the kubeconfig file (defaults to $KUBECONFIG)",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML settings file"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write logs to this file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages"),
) -> None:
    """Shed a light on the most resource intensive applications in a cluster."""
    _configure_logging(log_file, verbose)
    ctx.obj = {"kubeconfig": kubeconfig or None, "config": config}


@app.command()
def report(
    ctx: typer.Context,
    plain: bool = typer.Option(
        False, "--plain", help="Print the table to stdout instead of opening the TUI"
    ),
) -> None:
    """Show resources reservations and limits by pods for each node."""
    settings = _load_settings(ctx)
    if plain:
        _print_plain_report(settings)
        return
    _run_tui(ViewMode.REPORT, settings)


def _run_top(
    ctx: typer.Context,
    interval: Optional[int],
    rows: Optional[int],
    keep_going: bool,
    defaults: Optional[dict] = None,
) -> None:
    settings = _load_settings(
        ctx,
        defaults=defaults,
        refresh_interval=interval,
        rows_limit=rows,
        # Only an explicit flag overrides the settings file
        abort_on_cycle_error=False if keep_going else None,
    )
    _run_tui(ViewMode.TOP, settings)


INTERVAL_HELP = "Seconds between refreshes"
ROWS_HELP = "Number of pods to show"
KEEP_GOING_HELP = "Keep refreshing after a failed cycle instead of exiting"


@app.command()
def top(
    ctx: typer.Context,
    interval: Optional[int] = typer.Option(None, "--interval", "-i", min=1, help=INTERVAL_HELP),
    rows: Optional[int] = typer.Option(None, "--rows", "-n", min=1, help=ROWS_HELP),
    keep_going: bool = typer.Option(False, "--keep-going", help=KEEP_GOING_HELP),
) -> None:
    """Live view of the pods consuming the most CPU (refreshes every 10s)."""
    _run_top(ctx, interval, rows, keep_going)


@app.command()
def status(
    ctx: typer.Context,
    interval: Optional[int] = typer.Option(None, "--interval", "-i", min=1, help=INTERVAL_HELP),
    rows: Optional[int] = typer.Option(None, "--rows", "-n", min=1, help=ROWS_HELP),
    keep_going: bool = typer.Option(False, "--keep-going", help=KEEP_GOING_HELP),
) -> None:
    """Same as top, refreshing every second."""
    _run_top(
        ctx,
        interval,
        rows,
        keep_going,
        defaults={"refresh_interval": STATUS_REFRESH_INTERVAL_DEFAULT},
    )


if __name__ == "__main__":
    app()
