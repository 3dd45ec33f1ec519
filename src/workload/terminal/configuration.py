# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from workload import configuration
from workload.repository.configuration import CONFIGURATION_REPO
from workload.terminal.parse import parse_granularity
from workload.time import ensure_timezone
from workload.view.configuration import configuration_report

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

app = typer.Typer(help="Show or change configuration settings")


@app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    """Show the effective configuration when no subcommand is given."""
    if ctx.invoked_subcommand is None:
        view()


@app.command()
def view() -> None:
    """Display current configuration settings."""
    configuration_report(
        str(configuration.APP_CONFIG_PATH), CONFIGURATION_REPO.get_config()
    )


@app.command()
def set(
    granularity: Annotated[
        Optional[str],
        typer.Option(
            "--granularity",
            "-g",
            help="Default granularity for timeline: day, week, or month",
        ),
    ] = None,
    timezone: Annotated[
        Optional[str],
        typer.Option(
            "--timezone",
            help="Timezone used to read task dates (e.g. local, UTC, Europe/Brussels)",
        ),
    ] = None,
    trailing_months: Annotated[
        Optional[int],
        typer.Option(
            "--trailing-months",
            min=0,
            help="Months of padding after the last task on the lanes axis",
        ),
    ] = None,
    include_edge_idle: Annotated[
        Optional[bool],
        typer.Option(
            "--include-edge-idle/--no-include-edge-idle",
            help="Count idle days before the first and after the last task",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Print the report header",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help="Log level: DEBUG, INFO, WARNING, ERROR, or CRITICAL",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if granularity is not None:
        granularity = parse_granularity(granularity)
    if timezone is not None:
        try:
            ensure_timezone(timezone)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--timezone")
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in LOG_LEVELS:
            raise typer.BadParameter(
                f"Unknown log level {log_level}", param_hint="--log-level"
            )

    CONFIGURATION_REPO.update_config(
        granularity=granularity,
        timezone=timezone,
        trailing_months=trailing_months,
        include_edge_idle=include_edge_idle,
        show_header=show_header,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    typer.secho("Configuration updated successfully!", fg=typer.colors.GREEN)
    view()
