# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import TypedDict

import platformdirs

APP_NAME = "workload"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    granularity: str
    timezone: str
    trailing_months: int
    include_edge_idle: bool
    show_header: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "granularity": "day",
        "timezone": "local",
        "trailing_months": 6,
        "include_edge_idle": False,
        "show_header": True,
        "log_level": "WARNING",
    }

