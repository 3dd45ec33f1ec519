# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from workload.model.stats import WorkloadStats
from workload.view.header import header


def stats_report(source: str, stats: WorkloadStats) -> None:
    header(source, "workload")

    console = Console()

    assignee_table = Table(box=box.SIMPLE)
    assignee_table.add_column("assignee")
    assignee_table.add_column("tasks", justify="right")
    assignee_table.add_column("avg days", justify="right")
    assignee_table.add_column("overdue", justify="right")
    assignee_table.add_column("idle days", justify="right")

    for assignee in stats["per_assignee"]:
        overdue = str(assignee["overdue"])
        if assignee["overdue"] > 0:
            overdue = f"[red]{overdue}[/red]"
        assignee_table.add_row(
            assignee["name"],
            str(assignee["count"]),
            str(assignee["avg_duration"]),
            overdue,
            str(assignee["idle_days"]),
        )

    totals_table = Table(box=box.SIMPLE, show_header=False)
    totals_table.add_column("metric")
    totals_table.add_column("value", justify="right")
    totals_table.add_row("assignees", str(stats["total_assignees"]))
    totals_table.add_row("tasks", str(stats["total_tasks"]))
    totals_table.add_row("avg duration (days)", str(stats["avg_duration"]))
    totals_table.add_row("total idle days", str(stats["total_idle_days"]))
    totals_table.add_row(
        "avg idle days per assignee", f"{stats['avg_idle_days_per_assignee']:.1f}"
    )
    totals_table.add_row(
        "highest idle days",
        f"{stats['max_idle_days']} ({stats['max_idle_assignee'] or '-'})",
    )

    console.print(assignee_table)
    console.print(totals_table)
