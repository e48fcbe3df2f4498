"""History configuration package.

Defaults, merge helpers and YAML loading are split into focused modules.
"""

from __future__ import annotations

from .defaults import DEFAULT_CONFIG
from .settings import UndoSettings, load_settings

__all__ = [
    "DEFAULT_CONFIG",
    "UndoSettings",
    "load_settings",
]
