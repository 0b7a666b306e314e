# SPDX-License-Identifier: MIT

import logging

from tasktracker.migrate import registry
from tasktracker.repository.migrate import MIGRATE_REPO

logger = logging.getLogger(__name__)


def run_required_migrations() -> list[int]:
    """Run every registered migration newer than the data directory, in order."""
    registry.register_migrations()
    migrations = registry.get_migrations()
    latest_migration_id = MIGRATE_REPO.get_latest_migration_number()

    migrations_to_run = sorted(
        [
            (key, value)
            for key, value in migrations.items()
            if key > latest_migration_id
        ],
        key=lambda kvp: kvp[0],
    )

    for migration_id, migration_callable in migrations_to_run:
        logger.info("running migration %d", migration_id)
        MIGRATE_REPO.set_new_migration_number(migration_id)
        migration_callable()
        MIGRATE_REPO.flush()

    return [migration_id for migration_id, _ in migrations_to_run]
