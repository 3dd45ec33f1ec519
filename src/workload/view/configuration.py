# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from workload.configuration import Configuration


def configuration_report(config_path: str, config: Configuration) -> None:
    config_table = Table(title=config_path, title_justify="left", box=box.SIMPLE)
    config_table.add_column("key")
    config_table.add_column("value")

    for key, value in config.items():
        config_table.add_row(key, str(value))

    console = Console()
    console.print(config_table)
