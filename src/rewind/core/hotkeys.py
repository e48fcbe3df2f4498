"""Toolkit-independent dispatch of undo/redo keyboard shortcuts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Optional

from rewind.core.shortcuts import iter_shortcuts, normalize_shortcut

if TYPE_CHECKING:
    from rewind.core.history import UndoManager


logger = logging.getLogger(__name__)

_HANDLERS = {
    "undo": "undo",
    "redo": "redo",
    "redo_alt": "redo",
}


@dataclass
class HotkeyAction:
    key: str
    description: str | None = None
    handler: Optional[Callable[[], object]] = None

    def trigger(self) -> None:
        if self.handler:
            self.handler()


class HistoryHotkeys:
    """Maps normalised shortcuts of the ``history`` scope to a manager's undo/redo."""

    def __init__(self, manager: "UndoManager", overrides: Optional[Dict[str, str]] = None) -> None:
        self._actions: Dict[str, HotkeyAction] = {}
        overrides = overrides or {}
        for descriptor in iter_shortcuts("history"):
            key = normalize_shortcut(overrides.get(descriptor.action, descriptor.default))
            if not key:
                continue
            method = _HANDLERS.get(descriptor.action)
            if method is None:
                logger.debug("No history handler for shortcut action %s", descriptor.action)
                continue
            handler = getattr(manager, method)
            self._actions[key] = HotkeyAction(key=key, description=descriptor.label, handler=handler)

    @property
    def actions(self) -> Dict[str, HotkeyAction]:
        return dict(self._actions)

    def dispatch(self, shortcut: str) -> bool:
        action = self._actions.get(normalize_shortcut(shortcut))
        if action is None:
            return False
        logger.debug("Hotkey %s -> %s", action.key, action.description)
        action.trigger()
        return True

    def dispatch_key(self, key: str, *, ctrl: bool = False, alt: bool = False, shift: bool = False) -> bool:
        parts = [name for name, pressed in (("CTRL", ctrl), ("ALT", alt), ("SHIFT", shift)) if pressed]
        parts.append(key)
        return self.dispatch("+".join(parts))


__all__ = [
    "HistoryHotkeys",
    "HotkeyAction",
]
