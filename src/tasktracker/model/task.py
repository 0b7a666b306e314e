# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, get_args

import pendulum

from tasktracker.model.attachment import Attachment
from tasktracker.model.entity_id import EntityId
from tasktracker.model.note import WorkNote

TaskStatus = Literal["pending", "done", "canceled"]

TASK_STATUSES: tuple[TaskStatus, ...] = get_args(TaskStatus)


class Task(TypedDict):
    id: Optional[EntityId]
    title: str
    created: pendulum.DateTime
    updated: pendulum.DateTime
    due: Optional[pendulum.DateTime]
    status: TaskStatus
    work_notes: list[WorkNote]
    attachments: list[Attachment]
    tags: list[str]


def status_from_str(raw_status: Optional[str]) -> TaskStatus:
    """Unknown or missing stored values read as pending."""
    if raw_status in TASK_STATUSES:
        return raw_status  # type: ignore[return-value]
    return "pending"
