"""Environment overrides for where history settings are read from."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_PATH_VAR = "REWIND_CONFIG_PATH"
CONFIG_DIR_VAR = "REWIND_CONFIG_DIR"
SETTINGS_FILENAME = "settings.yaml"


def resolve_config_path(default_path: Path) -> Path:
    """An explicit file wins over a config directory; both win over ``default_path``."""

    explicit = os.environ.get(CONFIG_PATH_VAR)
    if explicit:
        return Path(explicit)
    directory = os.environ.get(CONFIG_DIR_VAR)
    if directory:
        return Path(directory) / SETTINGS_FILENAME
    return Path(default_path)
