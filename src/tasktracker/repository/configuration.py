# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tasktracker import configuration

logger = logging.getLogger(__name__)


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            self._config = configuration.get_default_configuration()
            self.is_dirty = True
            return

        # Back-fill settings added after the file was first written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                logger.debug("adding missing configuration key %s", key)
                self._config[key] = value  # type: ignore[literal-required]
                self.is_dirty = True

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        clear_ids_on_view: Optional[bool] = None,
        blue_min_days: Optional[int] = None,
        yellow_min_days: Optional[int] = None,
        orange_min_days: Optional[int] = None,
        red_min_days: Optional[int] = None,
        reminder_moments: Optional[list[str]] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if clear_ids_on_view is not None:
            self.config["clear_ids_on_view"] = clear_ids_on_view
        if blue_min_days is not None:
            self.config["blue_min_days"] = blue_min_days
        if yellow_min_days is not None:
            self.config["yellow_min_days"] = yellow_min_days
        if orange_min_days is not None:
            self.config["orange_min_days"] = orange_min_days
        if red_min_days is not None:
            self.config["red_min_days"] = red_min_days
        if reminder_moments is not None:
            self.config["reminder_moments"] = reminder_moments
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
