# SPDX-License-Identifier: MIT

from tasktracker.model.task import Task
from tasktracker.time import now_utc


def get_task_template() -> Task:
    now = now_utc()
    return {
        "id": None,
        "title": "",
        "created": now,
        "updated": now,
        "due": None,
        "status": "pending",
        "work_notes": [],
        "attachments": [],
        "tags": [],
    }
