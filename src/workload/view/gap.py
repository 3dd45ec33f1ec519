# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from workload.model.gap import GapRecord
from workload.service.gap import idle_days
from workload.time import date_to_display_str
from workload.view.header import header


def gaps_report(source: str, gaps: dict[str, list[GapRecord]]) -> None:
    header(source, "idle periods")

    console = Console()
    if not gaps:
        console.print("\n[dim]No tasks with usable dates to display[/dim]\n")
        return

    gap_table = Table(box=box.SIMPLE)
    gap_table.add_column("assignee")
    gap_table.add_column("kind")
    gap_table.add_column("from")
    gap_table.add_column("to")
    gap_table.add_column("days", justify="right")

    for assignee, assignee_gaps in gaps.items():
        if not assignee_gaps:
            gap_table.add_row(assignee, "[dim]fully scheduled[/dim]", "", "", "0")
            continue
        for gap in assignee_gaps:
            gap_table.add_row(
                assignee,
                gap["kind"],
                date_to_display_str(gap["start"]),
                date_to_display_str(gap["end"]),
                str(gap["days"]),
            )
        gap_table.add_row(
            "", "[bold]total[/bold]", "", "", f"[bold]{idle_days(assignee_gaps)}[/bold]"
        )

    console.print(gap_table)
