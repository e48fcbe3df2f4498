"""History settings: defaults merged with caller or YAML overrides."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .defaults import DEFAULT_CONFIG
from .merge import _deep_merge
from rewind.core.env import resolve_config_path


logger = logging.getLogger(__name__)

SECTION = "history"


@dataclass(frozen=True)
class UndoSettings:
    """Construction-time options of an ``UndoManager``."""

    limit: Any = DEFAULT_CONFIG[SECTION]["limit"]
    debug: bool = DEFAULT_CONFIG[SECTION]["debug"]
    bind_hotkeys: bool = DEFAULT_CONFIG[SECTION]["bind_hotkeys"]
    use_transactions: bool = DEFAULT_CONFIG[SECTION]["use_transactions"]

    @classmethod
    def from_mapping(cls, overrides: Optional[Mapping[str, Any]] = None) -> "UndoSettings":
        """Merge ``overrides`` against the defaults field by field.

        Accepts a flat mapping of field names or a full document holding a
        ``history`` section. Unknown keys are ignored.
        """

        raw: Dict[str, Any] = dict(overrides or {})
        section = raw.get(SECTION)
        if isinstance(section, Mapping):
            raw = dict(section)
        merged = _deep_merge(DEFAULT_CONFIG, {SECTION: raw})[SECTION]
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(merged) - known)
        if unknown:
            logger.debug("Ignoring unknown history options: %s", ", ".join(unknown))
        return cls(
            limit=merged["limit"],
            debug=bool(merged["debug"]),
            bind_hotkeys=bool(merged["bind_hotkeys"]),
            use_transactions=bool(merged["use_transactions"]),
        )

    def as_dict(self) -> Dict[str, Any]:
        return {SECTION: {field.name: getattr(self, field.name) for field in fields(self)}}


def load_settings(path: Optional[Path] = None) -> UndoSettings:
    """Read settings from a YAML file, falling back to defaults."""

    config_path = resolve_config_path(path or Path("config/settings.yaml"))
    if not config_path.exists():
        return UndoSettings()
    with config_path.open("r", encoding="utf-8") as file:
        user_config = yaml.safe_load(file) or {}
    if not isinstance(user_config, dict):
        logger.warning("Ignoring malformed history settings in %s", config_path)
        user_config = {}
    return UndoSettings.from_mapping(user_config)


__all__ = [
    "UndoSettings",
    "load_settings",
]
