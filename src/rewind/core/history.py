"""Undo/redo history stack with optional transactions."""

from __future__ import annotations

import logging
import math
from numbers import Integral, Real
from typing import Any, List, Mapping, Optional, Union

from rewind.core.command import Command, coerce_command
from rewind.core.config import UndoSettings
from rewind.core.transaction import TransactionRecorder


def _validate_limit(limit: Any, caller: str) -> None:
    if (
        isinstance(limit, bool)
        or not isinstance(limit, Real)
        or not (isinstance(limit, Integral) or math.isfinite(limit))
        or limit < 1
    ):
        raise TypeError(
            f"UndoManager.{caller}(): unexpected argument limit={limit!r}. Should be a positive number"
        )


class UndoManager:
    """Records reversible commands and steps backward and forward through them.

    ``pointer`` indexes the most recently applied entry; ``-1`` means nothing
    is left to undo. Entries past the pointer are the redo-able tail and are
    dropped as soon as a new command is recorded.
    """

    def __init__(
        self,
        options: Union[UndoSettings, Mapping[str, Any], None] = None,
        *,
        logger: Optional[logging.Logger] = None,
        window: Any = None,
    ) -> None:
        if isinstance(options, UndoSettings):
            settings = options
        else:
            settings = UndoSettings.from_mapping(options)
        _validate_limit(settings.limit, "__init__")

        self._settings = settings
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._limit = math.floor(settings.limit)
        self._stack: List[Command] = []
        self._sp = -1

        self._transaction: Optional[TransactionRecorder] = None
        if settings.use_transactions:
            self._transaction = TransactionRecorder(self.record, log=self._log, log_warning=self._logger.warning)
        if settings.bind_hotkeys:
            if window is not None:
                self.bind_hotkeys(window)
            else:
                self._logger.warning("Hotkey binding requested but no window was given")
        elif window is not None:
            self._log("Window given but bind_hotkeys is off; hotkeys are not bound")

        self._log("Initialized with stack limit of %d commands", self._limit)

    @property
    def settings(self) -> UndoSettings:
        return self._settings

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def pointer(self) -> int:
        return self._sp

    @property
    def transaction(self) -> Optional[TransactionRecorder]:
        return self._transaction

    def bind_hotkeys(self, window: Any) -> "UndoManager":
        """Bind undo to Ctrl+Z and redo to Ctrl+Y / Ctrl+Shift+Z on a wx window."""

        from rewind.ui.hotkeys import bind_history_hotkeys

        bind_history_hotkeys(window, self)
        self._log("Bound 'undo' and 'redo' actions to 'Ctrl+Z', 'Ctrl+Y' & 'Ctrl+Shift+Z' hot keys")
        return self

    def record(self, *args: Any) -> "UndoManager":
        """Remember an already executed command.

        Accepts a command-like object with ``redo``/``undo`` callables or the
        two callables themselves.
        """

        self._record(coerce_command(*args, caller="record"))
        return self

    def execute(self, *args: Any) -> "UndoManager":
        """Run the command's ``redo`` and record it."""

        command = coerce_command(*args, caller="execute")
        self._log("Executing %s", command)
        command.redo()
        self._record(command)
        return self

    def undo(self) -> "UndoManager":
        if not self.can_undo():
            return self
        command = self._stack[self._sp]
        self._log("undo")
        self._sp -= 1
        command.undo()
        return self

    def redo(self) -> "UndoManager":
        if not self.can_redo():
            return self
        command = self._stack[self._sp + 1]
        self._log("redo")
        command.redo()
        self._sp += 1
        return self

    def can_undo(self) -> bool:
        return self._sp >= 0

    def can_redo(self) -> bool:
        return self._sp < len(self._stack) - 1

    def set_limit(self, limit: Any) -> "UndoManager":
        """Change the stack size limit.

        A limit below the number of redo-able commands is refused with a
        warning, since it would drop history that can still be redone.
        """

        _validate_limit(limit, "set_limit")
        redoable = len(self._stack) - self._sp - 1
        if limit < redoable:
            self._logger.warning(
                "UndoManager.set_limit(): cannot set stack limit (%s) less than the number of 'redoable' commands (%d)",
                limit,
                redoable,
            )
            return self
        self._limit = math.floor(limit)
        self._keep_limit()
        return self

    def reset(self) -> "UndoManager":
        self._log("reset")
        self._stack = []
        self._sp = -1
        return self

    def is_empty(self) -> bool:
        return not self._stack

    def is_full(self) -> bool:
        return len(self._stack) == self._limit

    def size(self) -> int:
        return len(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def _record(self, command: Command) -> None:
        if self._transaction is not None and self._transaction.is_in_progress():
            self._transaction.record(command)
            return
        self._log("Recording command: %s", command)
        self._rebase()
        self._stack.append(command)
        self._sp += 1
        self._keep_limit()

    def _rebase(self) -> None:
        if self.can_redo():
            del self._stack[self._sp + 1:]

    def _keep_limit(self) -> None:
        exceeds_by = len(self._stack) - self._limit
        if exceeds_by <= 0:
            return
        self._log("Stack size reached its limit: %d commands. Cutting off oldest commands...", self._limit)
        del self._stack[:exceeds_by]
        self._sp = max(-1, self._sp - exceeds_by)

    def _log(self, message: str, *args: Any) -> None:
        if self._settings.debug:
            self._logger.debug("UndoManager: " + message, *args)


__all__ = [
    "UndoManager",
]
