# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "trackline"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_EVENTS_PATH: Path = DATA_PATH / "events.yaml"


class Configuration(TypedDict):
    data_path: Optional[str]
    week_start: str
    default_view_mode: str
    invalid_interval_policy: str
    locale: str
    show_header: bool
    day_width: int


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "week_start": "monday",
        "default_view_mode": "week",
        "invalid_interval_policy": "reject",
        "locale": "en",
        "show_header": True,
        "day_width": 14,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_EVENTS_PATH

    DATA_PATH = data_path
    DATA_EVENTS_PATH = DATA_PATH / "events.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
