# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Iterator

import pytest

from tasktracker import configuration, state
from tasktracker.initialize import ensure_config_files, ensure_data_files
from tasktracker.repository.configuration import CONFIGURATION_REPO
from tasktracker.repository.id_map import ID_MAP_REPO
from tasktracker.repository.migrate import MIGRATE_REPO
from tasktracker.repository.reminder import REMINDER_REPO
from tasktracker.repository.tag import TAG_REPO
from tasktracker.repository.task import TASK_REPO

REPOSITORIES = (
    CONFIGURATION_REPO,
    ID_MAP_REPO,
    MIGRATE_REPO,
    REMINDER_REPO,
    TAG_REPO,
    TASK_REPO,
)


def reset_repositories() -> None:
    """Drop every cached load so the next access reads the files again."""
    for repository in REPOSITORIES:
        repository.__init__()  # type: ignore[misc]


@pytest.fixture(autouse=True)
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """
    Point configuration and data at a throwaway directory for every test.

    Repositories are module-level singletons, so their caches are reset on
    the way in and on the way out.
    """
    original_data_path = configuration.DATA_PATH
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "LOG_PATH", tmp_path / "logs")

    data_path = tmp_path / "data"
    configuration.set_data_path(data_path)
    ensure_config_files()
    ensure_data_files()
    reset_repositories()
    state.set_clear_ids(True)
    state.set_show_header(True)

    yield data_path

    reset_repositories()
    configuration.set_data_path(original_data_path)
