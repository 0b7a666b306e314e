# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from tasktracker.model.reminder import Reminder
from tasktracker.repository.id_map import ID_MAP_REPO
from tasktracker.time import datetime_to_display_local_datetime_str
from tasktracker.view.header import header


def reminders_view(report_name: str, reminders: list[Reminder]) -> None:
    header(report_name)

    table = Table(box=box.SIMPLE)
    table.add_column("task")
    table.add_column("fires")
    table.add_column("title")
    table.add_column("body")
    for reminder in reminders:
        table.add_row(
            str(ID_MAP_REPO.associate_id("tasks", reminder["task_id"])),
            datetime_to_display_local_datetime_str(reminder["fire_at"]),
            reminder["title"],
            reminder["body"],
        )

    console = Console()
    console.print(table)
