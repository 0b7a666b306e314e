# SPDX-License-Identifier: MIT

import logging
from typing import Any

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tasktracker import configuration
from tasktracker.migrate.registry import migration
from tasktracker.model.task import status_from_str

logger = logging.getLogger(__name__)


def convert_task(task: dict[str, Any]) -> bool:
    """
    Upgrade one stored task from a single flat `notes` string to the
    `work_notes` / `attachments` lists. Returns whether anything changed.
    """
    changed = False

    if "notes" in task:
        notes = task.pop("notes")
        work_notes = task.get("work_notes") or []
        if isinstance(notes, str) and notes.strip() != "":
            work_notes.insert(
                0,
                {"text": notes, "created": task["created"], "position": 0},
            )
            for position, work_note in enumerate(work_notes):
                work_note["position"] = position
        task["work_notes"] = work_notes
        changed = True
    elif "work_notes" not in task:
        task["work_notes"] = []
        changed = True

    if "attachments" not in task:
        task["attachments"] = []
        changed = True

    status = status_from_str(task.get("status"))
    if task.get("status") != status:
        task["status"] = status
        changed = True

    if task.get("tags") is None:
        task["tags"] = []
        changed = True

    return changed


@migration(2)
def migrate() -> None:
    tasks_dir = configuration.DATA_TASKS_DIR
    if not tasks_dir.is_dir():
        logger.info("no tasks directory at %s, skipping", tasks_dir)
        return

    converted_count = 0
    for file_path in sorted(tasks_dir.iterdir()):
        if file_path.suffix != ".yaml":
            continue
        task = load(file_path.read_text(), Loader=Loader)
        if task is None:
            continue
        if convert_task(task):
            file_path.write_text(dump(task, Dumper=Dumper))
            converted_count += 1

    logger.info("migration 2 converted %d tasks", converted_count)
