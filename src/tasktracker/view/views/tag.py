# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from tasktracker.view.header import header


def tags_view(usage: dict[str, int]) -> None:
    header("tags")

    table = Table(box=box.SIMPLE)
    table.add_column("tag")
    table.add_column("tasks")
    for tag, count in usage.items():
        table.add_row(tag, str(count))

    console = Console()
    console.print(table)
