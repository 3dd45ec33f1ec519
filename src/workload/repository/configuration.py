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

from workload import configuration

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
        raw_config = None
        if configuration.APP_CONFIG_PATH.is_file():
            raw_config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise ValueError(
                f"Configuration at {configuration.APP_CONFIG_PATH} must be a mapping"
            )

        # Fill in any keys missing from older or hand-written config files
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in raw_config:
                logger.debug("Config key %s missing, using default %r", key, value)
                raw_config[key] = value

        self._config = raw_config  # type: ignore[assignment]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reload(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        granularity: Optional[str] = None,
        timezone: Optional[str] = None,
        trailing_months: Optional[int] = None,
        include_edge_idle: Optional[bool] = None,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if granularity is not None:
            self.config["granularity"] = granularity
        if timezone is not None:
            self.config["timezone"] = timezone
        if trailing_months is not None:
            self.config["trailing_months"] = trailing_months
        if include_edge_idle is not None:
            self.config["include_edge_idle"] = include_edge_idle
        if show_header is not None:
            self.config["show_header"] = show_header
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
