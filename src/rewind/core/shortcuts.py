"""Shortcut registry for history commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

MODIFIER_ORDER = ("CTRL", "ALT", "SHIFT")

ALIASES = {
    "CONTROL": "CTRL",
    "CMD": "CTRL",
    "DEL": "DELETE",
    "RETURN": "ENTER",
}


def _key(scope: str, action: str) -> str:
    return f"{scope}:{action}"


@dataclass
class ShortcutDescriptor:
    scope: str
    action: str
    label: str
    default: str

    @property
    def registry_key(self) -> str:
        return _key(self.scope, self.action)


_SHORTCUTS: Dict[str, ShortcutDescriptor] = {}


def register_shortcut(scope: str, action: str, *, label: str, default: str) -> None:
    descriptor = ShortcutDescriptor(scope=scope, action=action, label=label, default=default)
    _SHORTCUTS[descriptor.registry_key] = descriptor


def get_shortcut(scope: str, action: str) -> ShortcutDescriptor | None:
    return _SHORTCUTS.get(_key(scope, action))


def iter_shortcuts(scope: str | None = None) -> List[ShortcutDescriptor]:
    return [descriptor for descriptor in _SHORTCUTS.values() if scope is None or descriptor.scope == scope]


def normalize_shortcut(shortcut: str) -> str:
    """Normalise shortcut string representation (modifier order, aliases, casing)."""

    if not shortcut:
        return ""

    raw_parts = [part.strip().upper() for part in str(shortcut).split("+") if part.strip()]
    modifiers: list[str] = []
    key_part: str | None = None

    for part in raw_parts:
        canonical = ALIASES.get(part, part)
        if canonical in MODIFIER_ORDER:
            if canonical not in modifiers:
                modifiers.append(canonical)
        else:
            key_part = canonical

    if key_part is None:
        return ""

    ordered_modifiers = [name for name in MODIFIER_ORDER if name in modifiers]
    return "+".join(ordered_modifiers + [key_part])


def _register_defaults() -> None:
    register_shortcut("history", "undo", label="Undo", default="CTRL+Z")
    register_shortcut("history", "redo", label="Redo", default="CTRL+Y")
    register_shortcut("history", "redo_alt", label="Redo (alternative)", default="CTRL+SHIFT+Z")


_register_defaults()


__all__ = [
    "ALIASES",
    "MODIFIER_ORDER",
    "ShortcutDescriptor",
    "get_shortcut",
    "iter_shortcuts",
    "normalize_shortcut",
    "register_shortcut",
]
