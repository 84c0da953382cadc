# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "caretrack"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    month_cell_limit: int
    default_category: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "month_cell_limit": 3,
        "default_category": "other",
    }


def load_data_path_configuration() -> None:
    """
    Point DATA_PATH at the configured data directory.

    This must be called after the config file exists and before the
    session opens its store.
    """
    global DATA_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
