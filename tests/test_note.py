# SPDX-License-Identifier: MIT

import pytest

from tasktracker.repository.task import TASK_REPO
from tasktracker.service import note as note_service
from tasktracker.service.position import reindex
from tasktracker.service.task import create_task


def texts(task_id: str) -> list[str]:
    task = TASK_REPO.get_task(task_id)
    return [work_note["text"] for work_note in task["work_notes"]]


def positions(task_id: str) -> list[int]:
    task = TASK_REPO.get_task(task_id)
    return [work_note["position"] for work_note in task["work_notes"]]


@pytest.fixture()
def task_id() -> str:
    id = create_task("migrate billing", note="started spike")
    note_service.add_note(id, "talked to finance")
    note_service.add_note(id, "draft ready")
    return id


def test_initial_note_and_appends_are_ordered(task_id: str) -> None:
    assert texts(task_id) == ["started spike", "talked to finance", "draft ready"]
    assert positions(task_id) == [0, 1, 2]


def test_latest_note_is_highest_position(task_id: str) -> None:
    latest = note_service.latest_note(TASK_REPO.get_task(task_id))

    assert latest is not None
    assert latest["text"] == "draft ready"


def test_latest_note_of_task_without_notes_is_none() -> None:
    id = create_task("blank")

    assert note_service.latest_note(TASK_REPO.get_task(id)) is None


def test_remove_keeps_positions_contiguous(task_id: str) -> None:
    removed = note_service.remove_note(task_id, 1)

    assert removed["text"] == "talked to finance"
    assert texts(task_id) == ["started spike", "draft ready"]
    assert positions(task_id) == [0, 1]


def test_move_reorders(task_id: str) -> None:
    note_service.move_note(task_id, 2, 0)

    assert texts(task_id) == ["draft ready", "started spike", "talked to finance"]
    assert positions(task_id) == [0, 1, 2]


def test_edit_changes_text_only(task_id: str) -> None:
    note_service.edit_note(task_id, 0, "spike done")

    assert texts(task_id)[0] == "spike done"
    assert positions(task_id) == [0, 1, 2]


def test_out_of_range_position_is_rejected(task_id: str) -> None:
    with pytest.raises(ValueError):
        note_service.remove_note(task_id, 3)
    with pytest.raises(ValueError):
        note_service.move_note(task_id, 0, -1)


def test_empty_note_text_is_rejected(task_id: str) -> None:
    with pytest.raises(ValueError):
        note_service.add_note(task_id, "   ")


def test_reindex_closes_gaps() -> None:
    work_notes = [
        {"text": "b", "created": None, "position": 7},
        {"text": "a", "created": None, "position": 2},
    ]

    reindexed = reindex(work_notes)  # type: ignore[type-var]

    assert [(n["text"], n["position"]) for n in reindexed] == [("a", 0), ("b", 1)]
