# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from workload.model.bucket import WeeklyWorkload
from workload.view.header import header

INTENSITY_STYLES = ["dim", "blue", "bold blue", "bold bright_blue", "reverse blue"]


def get_intensity(count: int) -> int:
    """Map a weekly task count to an intensity level (0-4)."""
    if count >= 5:
        return 4
    elif count >= 3:
        return 3
    elif count >= 2:
        return 2
    elif count >= 1:
        return 1
    return 0


def weekly_workload_report(source: str, weekly: WeeklyWorkload) -> None:
    header(source, "weekly workload")

    console = Console()
    if not weekly["weeks"]:
        console.print("\n[dim]No tasks with usable dates to display[/dim]\n")
        return

    heatmap_table = Table(box=box.SIMPLE)
    heatmap_table.add_column("assignee")
    for week in weekly["weeks"]:
        heatmap_table.add_column(week, justify="center")

    for assignee, per_week in weekly["counts"].items():
        cells = []
        for week in weekly["weeks"]:
            count = per_week.get(week, 0)
            style = INTENSITY_STYLES[get_intensity(count)]
            cells.append(f"[{style}]{count or '-'}[/{style}]")
        heatmap_table.add_row(assignee, *cells)

    console.print(heatmap_table)
