# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from tasktracker.color import DueColor, DueColorScheme, color_for_task
from tasktracker.model.reminder import Reminder
from tasktracker.model.task import Task
from tasktracker.repository.id_map import ID_MAP_REPO
from tasktracker.service.note import latest_note
from tasktracker.time import (
    datetime_to_display_local_datetime_str,
    datetime_to_display_local_datetime_str_optional,
)
from tasktracker.view.header import header
from tasktracker.view.util import (
    color_dot,
    colorize,
    due_in,
    format_size,
    format_tags,
    task_state,
)
from tasktracker.view.views.note import notes_table


def tasks_view(
    report_name: str,
    tasks: list[Task],
    scheme: DueColorScheme,
    columns: list[str] = [
        "id",
        "color",
        "state",
        "title",
        "due",
        "due_in",
        "tags",
        "attachments",
        "latest_note",
    ],
) -> None:
    header(report_name)

    tasks_table = Table(box=box.SIMPLE)
    for column in columns:
        tasks_table.add_column(column)

    for task in tasks:
        color = color_for_task(task, scheme)
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = str(ID_MAP_REPO.associate_id("tasks", str(task["id"])))
            elif column == "color":
                column_value = color_dot(color)
            elif column == "state":
                column_value = task_state(task)
            elif column == "title":
                column_value = task["title"]
            elif column == "due":
                column_value = (
                    datetime_to_display_local_datetime_str_optional(task["due"]) or ""
                )
            elif column == "due_in":
                column_value = due_in(task)
            elif column == "tags":
                column_value = format_tags(task["tags"])
            elif column == "latest_note":
                work_note = latest_note(task)
                column_value = (
                    work_note["text"].splitlines()[0] if work_note is not None else ""
                )
            elif column == "attachments":
                column_value = str(len(task["attachments"]) or "")

            if color == DueColor.MUTED and column != "color":
                column_value = colorize(column_value, color)

            row.append(column_value)
        tasks_table.add_row(*row)

    console = Console()
    console.print(tasks_table)


def single_task_view(
    task: Task,
    scheme: DueColorScheme,
    reminders: Optional[list[Reminder]] = None,
) -> None:
    header("task")

    color = color_for_task(task, scheme)

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row(
        "id", str(ID_MAP_REPO.associate_id("tasks", str(task["id"])))
    )
    task_table.add_row("title", task["title"])
    task_table.add_row("status", task["status"])
    task_table.add_row("color", f"{color_dot(color)} {color.name.lower()}")
    task_table.add_row(
        "due", datetime_to_display_local_datetime_str_optional(task["due"])
    )
    task_table.add_row("due_in", due_in(task))
    task_table.add_row("tags", format_tags(task["tags"]))
    task_table.add_row("created", datetime_to_display_local_datetime_str(task["created"]))
    task_table.add_row("updated", datetime_to_display_local_datetime_str(task["updated"]))

    console = Console()
    console.print(task_table)

    if len(task["work_notes"]) > 0:
        console.print(notes_table(task["work_notes"]))

    if len(task["attachments"]) > 0:
        attachments_table = Table(box=box.SIMPLE, title="attachments")
        attachments_table.add_column("position")
        attachments_table.add_column("file")
        attachments_table.add_column("kind")
        attachments_table.add_column("size")
        for attachment in task["attachments"]:
            attachments_table.add_row(
                str(attachment["position"]),
                attachment["file_name"],
                "linked" if attachment["bookmark"] is not None else "copied",
                format_size(attachment["size"]),
            )
        console.print(attachments_table)

    if reminders:
        reminders_table = Table(box=box.SIMPLE, title="reminders")
        reminders_table.add_column("moment")
        reminders_table.add_column("fires")
        for reminder in reminders:
            reminders_table.add_row(
                reminder["moment"],
                datetime_to_display_local_datetime_str(reminder["fire_at"]),
            )
        console.print(reminders_table)
