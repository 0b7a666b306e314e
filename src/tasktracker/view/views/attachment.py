# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from tasktracker.model.task import Task
from tasktracker.time import datetime_to_display_local_datetime_str
from tasktracker.view.header import header
from tasktracker.view.util import format_size


def attachments_view(task: Task) -> None:
    header(f"attachments: {task['title']}")

    table = Table(box=box.SIMPLE)
    table.add_column("position")
    table.add_column("file")
    table.add_column("type")
    table.add_column("size")
    table.add_column("kind")
    table.add_column("location")
    table.add_column("added")
    for attachment in task["attachments"]:
        linked = attachment["bookmark"] is not None
        table.add_row(
            str(attachment["position"]),
            attachment["file_name"],
            attachment["content_type"] or "",
            format_size(attachment["size"]),
            "linked" if linked else "copied",
            (attachment["bookmark"] if linked else attachment["relative_path"]) or "",
            datetime_to_display_local_datetime_str(attachment["created"]),
        )

    console = Console()
    console.print(table)
