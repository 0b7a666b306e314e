# SPDX-License-Identifier: MIT

import logging
from typing import Any

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from tasktracker import configuration, state
from tasktracker.logging_setup import setup_logging
from tasktracker.migrate import migrate
from tasktracker.model.id_map import IdMap
from tasktracker.repository.configuration import CONFIGURATION_REPO
from tasktracker.template.id_map import get_id_map_template

logger = logging.getLogger(__name__)


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    ensure_config_files()
    configuration.load_data_path_configuration()

    config = CONFIGURATION_REPO.get_config()
    setup_logging(console_level=config["log_level"].upper())

    ensure_data_files()

    state.apply_configuration(config)

    applied = migrate.run_required_migrations()
    if applied:
        logger.info("applied migrations %s", applied)


def ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def ensure_data_files() -> None:
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    # Single-file data stores
    if not configuration.DATA_MIGRATE_PATH.is_file():
        migrate_data: dict[str, Any] = {"version": 0}
        configuration.DATA_MIGRATE_PATH.write_text(dump(migrate_data, Dumper=Dumper))
    if not configuration.DATA_TAGS_PATH.is_file():
        tags: dict[str, Any] = {"tags": []}
        configuration.DATA_TAGS_PATH.write_text(dump(tags, Dumper=Dumper))
    if not configuration.DATA_REMINDERS_PATH.is_file():
        reminders: dict[str, Any] = {"reminders": []}
        configuration.DATA_REMINDERS_PATH.write_text(dump(reminders, Dumper=Dumper))
    if not configuration.DATA_ID_MAP_PATH.is_file():
        id_map: IdMap = get_id_map_template()
        configuration.DATA_ID_MAP_PATH.write_text(dump(id_map, Dumper=Dumper))

    # Directory-based stores (one file per task, one folder per task's copies)
    configuration.DATA_TASKS_DIR.mkdir(parents=True, exist_ok=True)
    configuration.DATA_ATTACHMENTS_DIR.mkdir(parents=True, exist_ok=True)
