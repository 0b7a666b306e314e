# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from tasktracker.color import DueColor
from tasktracker.model.task import Task
from tasktracker.time import days_until


def task_state(task: Task) -> str:
    """
    State symbol for a task: "X" when done, "/" when canceled, " " when pending.
    """
    if task["status"] == "done":
        return "X"
    elif task["status"] == "canceled":
        return "/"
    return " "


def due_in(task: Task, now: Optional[pendulum.DateTime] = None) -> str:
    if task["due"] is None:
        return "no due date"
    days = days_until(task["due"], now)
    if days == 0:
        return "today"
    if days == 1:
        return "tomorrow"
    if days == -1:
        return "yesterday"
    if days < 0:
        return f"{-days} days overdue"
    return f"in {days} days"


def format_tags(tags: list[str]) -> str:
    return ", ".join(tags)


def format_size(size: Optional[int]) -> str:
    if size is None:
        return ""
    if size < 1024:
        return f"{size} B"
    value = size / 1024
    for unit in ("KB", "MB"):
        if value < 1024:
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GB"


def color_dot(color: DueColor) -> str:
    return f"[{color.value}]●[/{color.value}]"


def colorize(text: str, color: DueColor) -> str:
    return f"[{color.value}]{text}[/{color.value}]"
