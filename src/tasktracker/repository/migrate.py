# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tasktracker import configuration
from tasktracker.model.migrate import Migrate

logger = logging.getLogger(__name__)


class MigrateRepository:
    """Tracks the last migration applied to the data directory."""

    def __init__(self) -> None:
        self._migrate_data: Optional[Migrate] = None
        self.is_dirty = False

    @property
    def migrate_data(self) -> Migrate:
        if self._migrate_data is None:
            self._migrate_data = self.__read_version_file()
        return self._migrate_data

    def __read_version_file(self) -> Migrate:
        migrate_data: Optional[Migrate] = load(
            configuration.DATA_MIGRATE_PATH.read_text(), Loader=Loader
        )
        # An emptied file means nothing was ever applied
        if migrate_data is None or "version" not in migrate_data:
            return {"version": 0}
        return migrate_data

    def flush(self) -> bool:
        if self._migrate_data is None or not self.is_dirty:
            return False
        configuration.DATA_MIGRATE_PATH.write_text(
            dump(self._migrate_data, Dumper=Dumper)
        )
        self.is_dirty = False
        return True

    def get_latest_migration_number(self) -> int:
        return self.migrate_data["version"]

    def set_new_migration_number(self, migration_number: int) -> None:
        current = self.migrate_data["version"]
        if migration_number <= current:
            raise ValueError(
                f"{MigrateRepository.__name__}.{MigrateRepository.set_new_migration_number.__name__}: error, migration {migration_number} does not follow {current}"
            )
        logger.debug("data directory moves from migration %d to %d", current, migration_number)
        self.is_dirty = True
        self.migrate_data["version"] = migration_number


MIGRATE_REPO = MigrateRepository()
