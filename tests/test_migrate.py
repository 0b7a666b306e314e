# SPDX-License-Identifier: MIT

from pathlib import Path
from textwrap import dedent

import pytest
from yaml import safe_load

from tasktracker import configuration
from tasktracker.migrate import registry
from tasktracker.migrate.migrate import run_required_migrations
from tasktracker.migrate.migrations.migration_2_convert_notes_to_work_notes import (
    convert_task,
)
from tasktracker.repository.migrate import MIGRATE_REPO
from tasktracker.repository.task import TASK_REPO

V1_TASK = dedent(
    """\
    id: 6f1c8a2e-0000-4000-8000-000000000001
    title: Ship release
    notes: "checked changelog\\nwaiting on QA"
    created: '2024-02-01T09:00:00+00:00'
    updated: '2024-02-03T10:00:00+00:00'
    due: '2024-02-10T17:00:00+00:00'
    status: pending
    tags:
    - release
    """
)

V1_TASK_WITHOUT_NOTES = dedent(
    """\
    id: 6f1c8a2e-0000-4000-8000-000000000002
    title: Tidy backlog
    notes: ''
    created: '2024-02-02T09:00:00+00:00'
    updated: '2024-02-02T09:00:00+00:00'
    due: null
    status: archived
    tags: null
    """
)


def write_task(name: str, content: str) -> Path:
    path = configuration.DATA_TASKS_DIR / f"{name}.yaml"
    path.write_text(content)
    return path


def test_convert_task_moves_flat_notes_into_first_work_note() -> None:
    task = safe_load(V1_TASK)

    assert convert_task(task) is True

    assert "notes" not in task
    assert task["work_notes"] == [
        {
            "text": "checked changelog\nwaiting on QA",
            "created": "2024-02-01T09:00:00+00:00",
            "position": 0,
        }
    ]
    assert task["attachments"] == []
    assert task["status"] == "pending"


def test_convert_task_with_empty_notes_and_unknown_status() -> None:
    task = safe_load(V1_TASK_WITHOUT_NOTES)

    convert_task(task)

    assert task["work_notes"] == []
    assert task["status"] == "pending"
    assert task["tags"] == []


def test_convert_task_leaves_v2_task_alone() -> None:
    task = safe_load(V1_TASK)
    convert_task(task)

    assert convert_task(task) is False


def test_runner_applies_pending_migrations_in_order() -> None:
    write_task("6f1c8a2e-0000-4000-8000-000000000001", V1_TASK)
    write_task("6f1c8a2e-0000-4000-8000-000000000002", V1_TASK_WITHOUT_NOTES)

    assert run_required_migrations() == [1, 2]
    assert MIGRATE_REPO.get_latest_migration_number() == 2
    assert safe_load(configuration.DATA_MIGRATE_PATH.read_text()) == {"version": 2}

    tasks = {task["title"]: task for task in TASK_REPO.get_all_tasks()}
    assert tasks["Ship release"]["work_notes"][0]["text"].startswith("checked")
    assert tasks["Ship release"]["tags"] == ["release"]
    assert tasks["Tidy backlog"]["work_notes"] == []
    assert tasks["Tidy backlog"]["status"] == "pending"


def test_runner_does_not_repeat_applied_migrations() -> None:
    run_required_migrations()
    path = write_task("6f1c8a2e-0000-4000-8000-000000000001", V1_TASK)

    assert run_required_migrations() == []
    assert "notes" in safe_load(path.read_text())


def test_migration_numbers_only_move_forward() -> None:
    run_required_migrations()

    with pytest.raises(ValueError):
        MIGRATE_REPO.set_new_migration_number(2)


def test_registry_discovers_both_migrations() -> None:
    registry.register_migrations()

    assert {1, 2} <= set(registry.get_migrations())
