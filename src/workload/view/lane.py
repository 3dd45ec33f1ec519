# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from workload.model.granularity_type import GranularityType
from workload.model.lane import LaneLayout
from workload.service.bucket import bar_placement
from workload.time import date_to_key, inclusive_days
from workload.view.header import header


def lanes_report(
    source: str,
    lanes: dict[str, LaneLayout],
    axis_start: pendulum.Date,
    axis_end: pendulum.Date,
    granularity: GranularityType,
) -> None:
    """
    Display the row assignment of every assignee's tasks.

    The col and span columns place each task bar on a timeline axis running
    from axis_start to axis_end in units of the given granularity.
    """
    header(source, "lanes")

    console = Console()
    if not lanes:
        console.print("\n[dim]No tasks with usable dates to display[/dim]\n")
        return

    console.print(
        f"\n[bold]{date_to_key(axis_start)} to {date_to_key(axis_end)}[/bold] (granularity: {granularity})\n"
    )

    for assignee, layout in lanes.items():
        lane_table = Table(
            title=f"{assignee} ({layout['row_count']} rows)",
            title_justify="left",
            box=box.SIMPLE,
        )
        lane_table.add_column("row", justify="right")
        lane_table.add_column("key")
        lane_table.add_column("start")
        lane_table.add_column("end")
        lane_table.add_column("days", justify="right")
        lane_table.add_column("col", justify="right")
        lane_table.add_column("span", justify="right")

        for assignment in layout["assignments"]:
            start_col, span_cols = bar_placement(
                assignment["start"], assignment["end"], axis_start, granularity
            )
            lane_table.add_row(
                str(assignment["row_index"]),
                assignment["task"]["key"],
                date_to_key(assignment["start"]),
                date_to_key(assignment["end"]),
                str(inclusive_days(assignment["start"], assignment["end"])),
                str(start_col),
                str(span_cols),
            )

        console.print(lane_table)
