# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from tasktracker.color import MAX_THRESHOLD_DAYS, MIN_THRESHOLD_DAYS
from tasktracker.model.reminder import NotifyWhen
from tasktracker.model.task import TASK_STATUSES


def validate_title(title: str) -> str:
    if title.strip() == "":
        raise typer.BadParameter("Title cannot be empty")
    return title.strip()


def validate_optional_title(title: Optional[str]) -> Optional[str]:
    if title is None:
        return None
    return validate_title(title)


def validate_status(status: Optional[str]) -> Optional[str]:
    if status is None:
        return None
    if status not in TASK_STATUSES:
        raise typer.BadParameter(
            f"Status must be one of {', '.join(TASK_STATUSES)}, got '{status}'"
        )
    return status


def validate_status_filter(status: str) -> str:
    if status != "all" and status not in TASK_STATUSES:
        raise typer.BadParameter(
            f"Status must be one of {', '.join(TASK_STATUSES)}, all; got '{status}'"
        )
    return status


def validate_threshold(days: Optional[int]) -> Optional[int]:
    if days is None:
        return None
    if not (MIN_THRESHOLD_DAYS <= days <= MAX_THRESHOLD_DAYS):
        raise typer.BadParameter(
            f"Threshold must be between {MIN_THRESHOLD_DAYS} and {MAX_THRESHOLD_DAYS} days (inclusive)"
        )
    return days


def validate_reminder_moments(moments: Optional[list[str]]) -> Optional[list[str]]:
    if moments is None or len(moments) == 0:
        return None
    valid = [moment.value for moment in NotifyWhen]
    for moment in moments:
        if moment not in valid:
            raise typer.BadParameter(
                f"Reminder moment must be one of {', '.join(valid)}, got '{moment}'"
            )
    return list(dict.fromkeys(moments))


def validate_log_level(level: Optional[str]) -> Optional[str]:
    if level is None:
        return None
    level = level.upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise typer.BadParameter(f"Unknown log level '{level}'")
    return level
