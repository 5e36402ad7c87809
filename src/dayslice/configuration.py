# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "dayslice"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ENTRIES_PATH: Path = DATA_PATH / "entries.yaml"


class Configuration(TypedDict):
    show_header: bool
    entries_path: Optional[str]
    uncategorized_name: str
    uncategorized_color: str
    unknown_task_title: str
    timeline_granularity: int
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "entries_path": None,
        "uncategorized_name": "Uncategorized",
        "uncategorized_color": "#CBD5E1",
        "unknown_task_title": "Unknown Task",
        "timeline_granularity": 60,
        "log_level": "WARNING",
    }


def resolve_entries_path(config: Configuration) -> Path:
    """Return the configured entries export, or the default one in the data directory."""
    if config["entries_path"] is not None:
        return Path(config["entries_path"]).expanduser()
    return DATA_ENTRIES_PATH
