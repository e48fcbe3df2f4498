from __future__ import annotations

from rewind import UndoManager
from rewind.core.hotkeys import HistoryHotkeys
from rewind.core import shortcuts
from rewind.core.shortcuts import ShortcutDescriptor, get_shortcut, normalize_shortcut


class Counter:
    def __init__(self) -> None:
        self.value = 0

    def increment(self) -> None:
        self.value += 1

    def decrement(self) -> None:
        self.value -= 1


def _manager_with_two_commands(counter: Counter) -> UndoManager:
    manager = UndoManager()
    manager.execute(counter.increment, counter.decrement)
    manager.execute(counter.increment, counter.decrement)
    return manager


def test_normalize_shortcut_orders_modifiers_and_aliases() -> None:
    assert normalize_shortcut(" shift + ctrl + z ") == "CTRL+SHIFT+Z"
    assert normalize_shortcut("control+y") == "CTRL+Y"
    assert normalize_shortcut("ctrl+ctrl+del") == "CTRL+DELETE"
    assert normalize_shortcut("ctrl+shift") == ""
    assert normalize_shortcut("") == ""


def test_default_history_shortcuts_are_registered() -> None:
    assert get_shortcut("history", "undo").default == "CTRL+Z"
    assert get_shortcut("history", "redo").default == "CTRL+Y"
    assert get_shortcut("history", "redo_alt").default == "CTRL+SHIFT+Z"


def test_dispatch_routes_to_undo_and_redo() -> None:
    counter = Counter()
    manager = _manager_with_two_commands(counter)
    hotkeys = HistoryHotkeys(manager)

    assert hotkeys.dispatch_key("z", ctrl=True) is True
    assert counter.value == 1
    assert hotkeys.dispatch_key("Z", ctrl=True) is True
    assert counter.value == 0

    assert hotkeys.dispatch_key("Y", ctrl=True) is True
    assert counter.value == 1
    assert hotkeys.dispatch("shift+ctrl+z") is True
    assert counter.value == 2


def test_unrelated_keys_are_not_handled() -> None:
    counter = Counter()
    manager = _manager_with_two_commands(counter)
    hotkeys = HistoryHotkeys(manager)

    assert hotkeys.dispatch_key("Z") is False
    assert hotkeys.dispatch_key("Z", ctrl=True, alt=True) is False
    assert hotkeys.dispatch("CTRL+X") is False
    assert counter.value == 2


def test_overrides_replace_default_keys() -> None:
    counter = Counter()
    manager = _manager_with_two_commands(counter)
    hotkeys = HistoryHotkeys(manager, {"undo": "alt+backspace"})

    assert "ALT+BACKSPACE" in hotkeys.actions
    assert hotkeys.dispatch("CTRL+Z") is False
    assert hotkeys.dispatch("ALT+BACKSPACE") is True
    assert counter.value == 1


def test_history_actions_without_handler_are_skipped(monkeypatch) -> None:
    descriptor = ShortcutDescriptor(scope="history", action="clear", label="Clear history", default="CTRL+SHIFT+DELETE")
    monkeypatch.setitem(shortcuts._SHORTCUTS, descriptor.registry_key, descriptor)

    counter = Counter()
    hotkeys = HistoryHotkeys(_manager_with_two_commands(counter))

    assert "CTRL+SHIFT+DELETE" not in hotkeys.actions
    assert hotkeys.dispatch("CTRL+SHIFT+DELETE") is False
    assert hotkeys.dispatch("CTRL+Z") is True
    assert counter.value == 1
