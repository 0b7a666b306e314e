# SPDX-License-Identifier: MIT

from typing import Optional

from tasktracker.model.entity_id import EntityId
from tasktracker.model.note import WorkNote
from tasktracker.model.task import Task
from tasktracker.repository.task import TASK_REPO
from tasktracker.service import position
from tasktracker.template.note import get_work_note_template


def __validate_text(text: str) -> str:
    if text.strip() == "":
        raise ValueError("work note text cannot be empty")
    return text


def add_note(task_id: EntityId, text: str) -> WorkNote:
    task = TASK_REPO.get_task(task_id)

    work_note = get_work_note_template()
    work_note["text"] = __validate_text(text)
    work_notes = position.append(task["work_notes"], work_note)

    TASK_REPO.modify_task(task_id, work_notes=work_notes)
    return work_note


def edit_note(task_id: EntityId, note_position: int, text: str) -> WorkNote:
    task = TASK_REPO.get_task(task_id)
    work_notes = position.reindex(task["work_notes"])
    position.check_position(work_notes, note_position)

    work_notes[note_position]["text"] = __validate_text(text)

    TASK_REPO.modify_task(task_id, work_notes=work_notes)
    return work_notes[note_position]


def remove_note(task_id: EntityId, note_position: int) -> WorkNote:
    task = TASK_REPO.get_task(task_id)
    work_notes, removed = position.remove(task["work_notes"], note_position)

    TASK_REPO.modify_task(task_id, work_notes=work_notes)
    return removed


def move_note(task_id: EntityId, note_position: int, new_position: int) -> None:
    task = TASK_REPO.get_task(task_id)
    work_notes = position.move(task["work_notes"], note_position, new_position)

    TASK_REPO.modify_task(task_id, work_notes=work_notes)


def latest_note(task: Task) -> Optional[WorkNote]:
    """The note with the highest position, which is the most recent entry."""
    if len(task["work_notes"]) == 0:
        return None
    return max(task["work_notes"], key=lambda work_note: work_note["position"])
