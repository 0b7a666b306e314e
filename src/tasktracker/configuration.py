# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "tasktracker"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
LOG_PATH = platformdirs.user_log_path(APP_NAME)

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_MIGRATE_PATH: Path = DATA_PATH / "migrate.yaml"
DATA_TAGS_PATH: Path = DATA_PATH / "tags.yaml"
DATA_REMINDERS_PATH: Path = DATA_PATH / "reminders.yaml"
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"
DATA_TASKS_DIR: Path = DATA_PATH / "tasks"
DATA_ATTACHMENTS_DIR: Path = DATA_PATH / "attachments"

DEFAULT_BLUE_MIN_DAYS = 30
DEFAULT_YELLOW_MIN_DAYS = 15
DEFAULT_ORANGE_MIN_DAYS = 8
DEFAULT_RED_MIN_DAYS = 0
DEFAULT_REMINDER_MOMENTS = ["one_day", "one_hour", "at_due"]


class Configuration(TypedDict):
    show_header: bool
    data_path: Optional[str]
    clear_ids_on_view: bool
    blue_min_days: int
    yellow_min_days: int
    orange_min_days: int
    red_min_days: int
    reminder_moments: list[str]
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "data_path": None,
        "clear_ids_on_view": True,
        "blue_min_days": DEFAULT_BLUE_MIN_DAYS,
        "yellow_min_days": DEFAULT_YELLOW_MIN_DAYS,
        "orange_min_days": DEFAULT_ORANGE_MIN_DAYS,
        "red_min_days": DEFAULT_RED_MIN_DAYS,
        "reminder_moments": list(DEFAULT_REMINDER_MOMENTS),
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    """Point every data file path at a new data directory."""
    global \
        DATA_PATH, \
        DATA_MIGRATE_PATH, \
        DATA_TAGS_PATH, \
        DATA_REMINDERS_PATH, \
        DATA_ID_MAP_PATH, \
        DATA_TASKS_DIR, \
        DATA_ATTACHMENTS_DIR

    DATA_PATH = data_path
    DATA_MIGRATE_PATH = DATA_PATH / "migrate.yaml"
    DATA_TAGS_PATH = DATA_PATH / "tags.yaml"
    DATA_REMINDERS_PATH = DATA_PATH / "reminders.yaml"
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
    DATA_TASKS_DIR = DATA_PATH / "tasks"
    DATA_ATTACHMENTS_DIR = DATA_PATH / "attachments"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are read.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting).expanduser())
