# SPDX-License-Identifier: MIT

import logging
from typing import Literal, Optional

import pendulum

from tasktracker.model.entity_id import EntityId
from tasktracker.model.task import Task, TaskStatus
from tasktracker.repository.id_map import ID_MAP_REPO
from tasktracker.repository.task import TASK_REPO
from tasktracker.service.attachment import remove_task_attachment_files
from tasktracker.service.note import add_note
from tasktracker.service.reminder import (
    cancel_reminders,
    retitle_reminders,
    sync_task_reminders,
)
from tasktracker.service.tag import ensure_tags, find_tag
from tasktracker.template.task import get_task_template

logger = logging.getLogger(__name__)

StatusFilter = Literal["pending", "done", "canceled", "all"]


def create_task(
    title: str,
    due: Optional[pendulum.DateTime] = None,
    status: TaskStatus = "pending",
    tags_input: Optional[str] = None,
    note: Optional[str] = None,
) -> EntityId:
    task = get_task_template()
    task["title"] = title
    task["due"] = due
    task["status"] = status
    task["tags"] = ensure_tags(tags_input) if tags_input is not None else []

    id = TASK_REPO.save_new_task(task)

    if note is not None and note.strip() != "":
        add_note(id, note)

    sync_task_reminders(TASK_REPO.get_task(id))
    return id


def update_task(
    id: EntityId,
    title: Optional[str] = None,
    due: Optional[pendulum.DateTime] = None,
    remove_due: bool = False,
    status: Optional[TaskStatus] = None,
    tags_input: Optional[str] = None,
    add_tags: Optional[list[str]] = None,
    remove_tags: Optional[list[str]] = None,
) -> Task:
    """
    Apply any subset of edits to a task and bring its reminders in line.

    `tags_input` replaces the tag list; `add_tags` and `remove_tags` adjust
    it afterwards.
    """
    updated_tags = None
    if tags_input is not None or add_tags is not None or remove_tags is not None:
        current_tags = TASK_REPO.get_task(id)["tags"]
        if tags_input is not None:
            current_tags = ensure_tags(tags_input)
        if add_tags is not None:
            current_tags = current_tags + ensure_tags(", ".join(add_tags))
        if remove_tags is not None:
            removed = {find_tag(name.strip()) or name.strip() for name in remove_tags}
            current_tags = [tag for tag in current_tags if tag not in removed]
        updated_tags = current_tags

    TASK_REPO.modify_task(
        id,
        title=title,
        due=due,
        status=status,
        tags=updated_tags,
        remove_due=remove_due,
    )

    task = TASK_REPO.get_task(id)
    if due is not None or remove_due or status is not None:
        sync_task_reminders(task)
    elif title is not None:
        retitle_reminders(task)
    return task


def set_status(id: EntityId, status: TaskStatus) -> Task:
    return update_task(id, status=status)


def delete_task(id: EntityId) -> None:
    cancel_reminders(id)
    remove_task_attachment_files(id)
    TASK_REPO.delete_task(id)
    ID_MAP_REPO.dissociate_id("tasks", id)


def matches_search(task: Task, search: str) -> bool:
    query = search.casefold()
    if query in task["title"].casefold():
        return True
    return any(query in work_note["text"].casefold() for work_note in task["work_notes"])


def filter_tasks(
    tasks: list[Task],
    status: StatusFilter = "pending",
    tags: Optional[list[str]] = None,
    search: Optional[str] = None,
) -> list[Task]:
    """
    Keep tasks in the given status that carry at least one of the selected
    tags and whose title or notes contain the search text.
    """
    selected_tags = set(tags or [])
    filtered: list[Task] = []
    for task in tasks:
        if status != "all" and task["status"] != status:
            continue
        if selected_tags and selected_tags.isdisjoint(task["tags"]):
            continue
        if search and not matches_search(task, search):
            continue
        filtered.append(task)
    return sort_tasks(filtered)


def sort_tasks(tasks: list[Task]) -> list[Task]:
    """Dated tasks first by due date, then undated tasks by creation time."""
    dated = sorted(
        [task for task in tasks if task["due"] is not None],
        key=lambda task: (task["due"], task["created"]),
    )
    undated = sorted(
        [task for task in tasks if task["due"] is None],
        key=lambda task: task["created"],
    )
    return dated + undated
