# SPDX-License-Identifier: MIT

import atexit
import logging
from typing import Protocol

from tasktracker.repository.configuration import CONFIGURATION_REPO
from tasktracker.repository.id_map import ID_MAP_REPO
from tasktracker.repository.migrate import MIGRATE_REPO
from tasktracker.repository.reminder import REMINDER_REPO
from tasktracker.repository.tag import TAG_REPO
from tasktracker.repository.task import TASK_REPO

logger = logging.getLogger(__name__)


class Flushable(Protocol):
    def flush(self) -> bool: ...


REPOSITORIES: dict[str, Flushable] = {
    "config": CONFIGURATION_REPO,
    "id map": ID_MAP_REPO,
    "migrations": MIGRATE_REPO,
    "tasks": TASK_REPO,
    "reminders": REMINDER_REPO,
    "tags": TAG_REPO,
}


def flush_all() -> list[str]:
    """Write back every repository holding unsaved changes."""
    written = [name for name, repo in REPOSITORIES.items() if repo.flush()]
    if written:
        logger.debug("flushed %s", ", ".join(written))
    return written


def register_cleanup() -> None:
    atexit.register(flush_all)
