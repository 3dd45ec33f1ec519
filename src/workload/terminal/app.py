# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import pendulum
import typer

from workload.logging_setup import configure_logging
from workload.model.gap import WorkingPeriod
from workload.model.granularity_type import GranularityType
from workload.model.report import WorkloadReport
from workload.model.task import TaskRecord
from workload.repository.configuration import CONFIGURATION_REPO
from workload.repository.task import TaskFileError, TaskRepository
from workload.service.bucket import timeline_range
from workload.service.engine import compute_workload
from workload.service.interval import build_intervals, group_by_assignee
from workload.terminal import configuration
from workload.terminal.parse import parse_date, parse_datetime, parse_granularity
from workload.time import today_local
from workload.view import state as view_state
from workload.view.gap import gaps_report
from workload.view.heatmap import weekly_workload_report
from workload.view.lane import lanes_report
from workload.view.stats import stats_report
from workload.view.timeline import timeline_report

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Workload - Timeline layout and idle-time analytics for task lists",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config")

TaskFileArgument = Annotated[
    Path,
    typer.Argument(help="YAML file holding the task records"),
]
AssigneeOption = Annotated[
    Optional[str],
    typer.Option("--assignee", "-a", help="Only report on this assignee"),
]


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    Workload - Timeline layout and idle-time analytics for task lists

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        configure_logging("DEBUG")


@app.command()
def timeline(
    task_file: TaskFileArgument,
    granularity: Annotated[
        Optional[str],
        typer.Option(
            "--granularity",
            "-g",
            help="Time granularity: day, week, or month",
        ),
    ] = None,
    start: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--start",
            "-s",
            parser=parse_date,
            help="First day of the timeline (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
        ),
    ] = None,
    end: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--end",
            "-e",
            parser=parse_date,
            help="Last day of the timeline (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
        ),
    ] = None,
) -> None:
    """Group tasks into day, week, or month buckets."""
    config = CONFIGURATION_REPO.get_config()
    selected = parse_granularity(granularity or config["granularity"])
    tasks = _load_tasks(task_file)

    report = _compute_workload(
        tasks,
        selected,
        pendulum.now("local"),
        range_start=start,
        range_end=end,
        tz=config["timezone"],
    )

    timeline_report(str(task_file), report["buckets"], selected)
    _warn_about_records(report["excluded"], report["flagged"])


@app.command()
def lanes(
    task_file: TaskFileArgument,
    assignee: AssigneeOption = None,
    granularity: Annotated[
        Optional[str],
        typer.Option(
            "--granularity",
            "-g",
            help="Column unit used for bar placement: day, week, or month",
        ),
    ] = None,
) -> None:
    """Pack each assignee's tasks into non-overlapping rows."""
    config = CONFIGURATION_REPO.get_config()
    selected = parse_granularity(granularity or config["granularity"])
    tasks = _load_tasks(task_file, assignee)

    report = _compute_workload(
        tasks, selected, pendulum.now("local"), tz=config["timezone"]
    )
    intervals, _ = build_intervals(tasks, config["timezone"])
    axis_start, axis_end = timeline_range(
        intervals, today_local(), config["trailing_months"]
    )

    lanes_report(str(task_file), report["lanes"], axis_start, axis_end, selected)
    _warn_about_records(report["excluded"], report["flagged"])


@app.command()
def gaps(
    task_file: TaskFileArgument,
    assignee: AssigneeOption = None,
    edges: Annotated[
        Optional[bool],
        typer.Option(
            "--edges/--no-edges",
            help="Also count idle days before the first and after the last task",
        ),
    ] = None,
    period_start: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--from",
            parser=parse_date,
            help="Working period start used with --edges (defaults to each assignee's first task)",
        ),
    ] = None,
    period_end: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--to",
            parser=parse_date,
            help="Working period end used with --edges (defaults to each assignee's last task)",
        ),
    ] = None,
) -> None:
    """List idle periods between each assignee's tasks."""
    config = CONFIGURATION_REPO.get_config()
    include_edges = config["include_edge_idle"] if edges is None else edges
    tasks = _load_tasks(task_file, assignee)

    working_periods: Optional[dict[str, WorkingPeriod]] = None
    if include_edges:
        intervals, _ = build_intervals(tasks, config["timezone"])
        working_periods = {
            name: (
                period_start or min(i["start"] for i in assignee_intervals),
                period_end or max(i["end"] for i in assignee_intervals),
            )
            for name, assignee_intervals in group_by_assignee(intervals).items()
        }

    report = _compute_workload(
        tasks,
        "day",
        pendulum.now("local"),
        tz=config["timezone"],
        include_edge_idle=include_edges,
        working_periods=working_periods,
    )

    gaps_report(str(task_file), report["gaps"])
    _warn_about_records(report["excluded"], report["flagged"])


@app.command()
def stats(
    task_file: TaskFileArgument,
    now: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--now",
            "-n",
            parser=parse_datetime,
            help="Reference instant for overdue checks (YYYY-MM-DD[THH:mm] or now)",
        ),
    ] = None,
) -> None:
    """Summarize task counts, durations, overdue tasks, and idle days."""
    config = CONFIGURATION_REPO.get_config()
    tasks = _load_tasks(task_file)

    report = _compute_workload(
        tasks,
        "day",
        now or pendulum.now("local"),
        tz=config["timezone"],
    )

    stats_report(str(task_file), report["stats"])
    _warn_about_records(report["excluded"], report["flagged"])


@app.command()
def heatmap(task_file: TaskFileArgument) -> None:
    """Show how many tasks each assignee has per week."""
    config = CONFIGURATION_REPO.get_config()
    tasks = _load_tasks(task_file)

    report = _compute_workload(
        tasks, "week", pendulum.now("local"), tz=config["timezone"]
    )

    weekly_workload_report(str(task_file), report["weekly"])


def _compute_workload(
    tasks: list[TaskRecord],
    granularity: GranularityType,
    now: pendulum.DateTime,
    **options: Any,
) -> WorkloadReport:
    try:
        return compute_workload(tasks, granularity, now, **options)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def _load_tasks(task_file: Path, assignee: Optional[str] = None) -> list[TaskRecord]:
    try:
        tasks = TaskRepository(task_file).get_all_tasks()
    except TaskFileError as e:
        raise typer.BadParameter(str(e), param_hint="TASK_FILE")

    if assignee is not None:
        tasks = [task for task in tasks if task["assignee"] == assignee]
        if not tasks:
            logger.warning("No tasks found for assignee %s", assignee)
    return tasks


def _warn_about_records(excluded: list[str], flagged: list[str]) -> None:
    if excluded:
        typer.secho(
            f"Skipped {len(excluded)} task(s) without usable dates: {', '.join(excluded)}",
            fg=typer.colors.YELLOW,
            err=True,
        )
    if flagged:
        typer.secho(
            f"Due before created, shown as one day: {', '.join(flagged)}",
            fg=typer.colors.YELLOW,
            err=True,
        )


def run() -> None:
    app()
