# SPDX-License-Identifier: MIT

import logging

from tasktracker.migrate.registry import migration

logger = logging.getLogger(__name__)


@migration(1)
def migrate() -> None:
    """
    Placeholder so that there's a first version to kickoff the migrations system
    """
    logger.info("migration 1 complete")
