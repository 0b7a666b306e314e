# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from tasktracker.model.note import WorkNote
from tasktracker.model.task import Task
from tasktracker.time import datetime_to_display_local_datetime_str
from tasktracker.view.header import header


def notes_table(work_notes: list[WorkNote]) -> Table:
    table = Table(box=box.SIMPLE, title="work notes")
    table.add_column("position")
    table.add_column("created")
    table.add_column("text")
    for work_note in sorted(work_notes, key=lambda work_note: work_note["position"]):
        table.add_row(
            str(work_note["position"]),
            datetime_to_display_local_datetime_str(work_note["created"]),
            work_note["text"],
        )
    return table


def notes_view(task: Task) -> None:
    header(f"notes: {task['title']}")

    console = Console()
    console.print(notes_table(task["work_notes"]))
