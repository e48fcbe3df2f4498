"""wxPython adapter routing Ctrl+Z / Ctrl+Y / Ctrl+Shift+Z to an undo manager."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional

import wx

from rewind.core.hotkeys import HistoryHotkeys

if TYPE_CHECKING:
    from rewind.core.history import UndoManager


logger = logging.getLogger(__name__)


def key_event_to_shortcut(event: wx.KeyEvent) -> str:
    keycode = event.GetKeyCode()
    if not 32 < keycode <= 126:
        return ""
    parts = []
    if event.ControlDown():
        parts.append("CTRL")
    if event.AltDown():
        parts.append("ALT")
    if event.ShiftDown():
        parts.append("SHIFT")
    parts.append(chr(keycode).upper())
    return "+".join(parts)


def bind_history_hotkeys(
    window: wx.Window,
    manager: "UndoManager",
    overrides: Optional[Dict[str, str]] = None,
) -> HistoryHotkeys:
    """Route history shortcuts pressed inside ``window`` to ``manager``.

    Keys that are not history shortcuts are passed on with ``event.Skip()``.
    """

    hotkeys = HistoryHotkeys(manager, overrides)

    def _on_char_hook(event: wx.KeyEvent) -> None:
        shortcut = key_event_to_shortcut(event)
        if shortcut and hotkeys.dispatch(shortcut):
            return
        event.Skip()

    window.Bind(wx.EVT_CHAR_HOOK, _on_char_hook)
    logger.debug("History hotkeys bound: %s", ", ".join(sorted(hotkeys.actions)))
    return hotkeys


__all__ = [
    "bind_history_hotkeys",
    "key_event_to_shortcut",
]
