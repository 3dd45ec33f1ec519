# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from workload.view.state import get_show_header


def header(source: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the task source.

    Args:
        source: Where the task records were read from
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"
    source = f"[plum1]{source}[/plum1]"

    print(Padding("[dark_orange]workload[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(source, (0, 1)))
