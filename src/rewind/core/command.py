"""Reversible command value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

Action = Callable[[], Any]


@dataclass(frozen=True, eq=False)
class Command:
    """A pair of zero-argument callables: ``redo`` applies, ``undo`` reverts."""

    redo: Action
    undo: Action
    description: Optional[str] = None

    def __str__(self) -> str:
        if self.description:
            return self.description
        return getattr(self.redo, "__name__", "command")


def coerce_command(*args: Any, caller: str = "record") -> Command:
    """Build a ``Command`` from a command-like object or a ``(redo, undo)`` pair.

    Raises ``TypeError`` when the arguments match neither form.
    """

    if len(args) == 1:
        candidate = args[0]
        redo = getattr(candidate, "redo", None)
        undo = getattr(candidate, "undo", None)
        if callable(redo) and callable(undo):
            if isinstance(candidate, Command):
                return candidate
            return Command(redo=redo, undo=undo, description=getattr(candidate, "description", None))
    elif len(args) == 2 and callable(args[0]) and callable(args[1]):
        return Command(redo=args[0], undo=args[1])
    raise TypeError(f"UndoManager.{caller}(): unexpected arguments")


__all__ = [
    "Action",
    "Command",
    "coerce_command",
]
