# SPDX-License-Identifier: MIT

from pathlib import Path

from yaml import safe_dump, safe_load

from tasktracker import configuration
from tasktracker.repository.configuration import CONFIGURATION_REPO


def test_fresh_config_uses_defaults() -> None:
    config = CONFIGURATION_REPO.get_config()

    assert config == configuration.get_default_configuration()
    assert config["reminder_moments"] == ["one_day", "one_hour", "at_due"]


def test_missing_keys_are_back_filled_and_written() -> None:
    configuration.APP_CONFIG_PATH.write_text(
        safe_dump({"show_header": False, "data_path": None, "blue_min_days": 60})
    )

    config = CONFIGURATION_REPO.get_config()
    CONFIGURATION_REPO.flush()

    assert config["show_header"] is False
    assert config["blue_min_days"] == 60
    assert config["yellow_min_days"] == configuration.DEFAULT_YELLOW_MIN_DAYS
    assert safe_load(configuration.APP_CONFIG_PATH.read_text())["red_min_days"] == 0


def test_update_config_only_touches_given_settings() -> None:
    CONFIGURATION_REPO.update_config(orange_min_days=5, log_level="DEBUG")
    CONFIGURATION_REPO.flush()

    stored = safe_load(configuration.APP_CONFIG_PATH.read_text())
    assert stored["orange_min_days"] == 5
    assert stored["log_level"] == "DEBUG"
    assert stored["blue_min_days"] == configuration.DEFAULT_BLUE_MIN_DAYS


def test_data_path_setting_relocates_data_files(tmp_path: Path) -> None:
    elsewhere = tmp_path / "elsewhere"
    configuration.APP_CONFIG_PATH.write_text(safe_dump({"data_path": str(elsewhere)}))

    configuration.load_data_path_configuration()

    assert configuration.DATA_PATH == elsewhere
    assert configuration.DATA_TASKS_DIR == elsewhere / "tasks"
    assert configuration.DATA_REMINDERS_PATH == elsewhere / "reminders.yaml"
