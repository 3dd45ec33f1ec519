# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from workload.model.bucket import Bucket
from workload.model.granularity_type import GranularityType
from workload.time import date_to_key
from workload.view.header import header


def timeline_report(
    source: str, buckets: list[Bucket], granularity: GranularityType
) -> None:
    header(source, f"timeline ({granularity})")

    console = Console()
    if not buckets:
        console.print("\n[dim]No tasks with usable dates to display[/dim]\n")
        return

    timeline_table = Table(box=box.SIMPLE)
    timeline_table.add_column("bucket")
    timeline_table.add_column("until")
    timeline_table.add_column("week", justify="right")
    timeline_table.add_column("tasks", justify="right")
    timeline_table.add_column("keys")

    for bucket in buckets:
        count = len(bucket["tasks"])
        timeline_table.add_row(
            bucket["key"],
            date_to_key(bucket["end"]),
            str(bucket["week_number"]),
            str(count) if count else "[dim]-[/dim]",
            ", ".join(task["key"] for task in bucket["tasks"]),
        )

    console.print(timeline_table)
