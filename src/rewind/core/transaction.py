"""Transaction buffering on top of the history stack."""

from __future__ import annotations

import logging
from enum import Enum
from functools import partial
from typing import Callable, List, Optional, Sequence

from rewind.core.command import Command


logger = logging.getLogger(__name__)


class TransactionPhase(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"


class TransactionInProgressError(RuntimeError):
    """Raised when a transaction block is entered while another one is open."""


def _replay_forward(sequence: Sequence[Command]) -> None:
    for command in sequence:
        command.redo()


def _replay_backward(sequence: Sequence[Command]) -> None:
    for command in reversed(sequence):
        command.undo()


class TransactionRecorder:
    """Collects commands between ``begin`` and ``end`` and commits them as one.

    ``commit`` receives the composite command once the transaction ends. It is
    called after the phase has returned to pending, so the stack records it
    instead of forwarding it back here.
    """

    def __init__(
        self,
        commit: Callable[[Command], object],
        *,
        log: Optional[Callable[..., None]] = None,
        log_warning: Optional[Callable[..., None]] = None,
    ) -> None:
        self._commit = commit
        self._log = log or logger.debug
        self._warn = log_warning or logger.warning
        self._phase = TransactionPhase.PENDING
        self._sequence: List[Command] = []
        self._log("TransactionRecorder is initialized")

    @property
    def phase(self) -> TransactionPhase:
        return self._phase

    def __len__(self) -> int:
        return len(self._sequence)

    def begin(self) -> None:
        if self._phase is TransactionPhase.IN_PROGRESS:
            # Transactions are flat: a second begin joins the open one.
            self._warn(
                "Transaction already in progress; %d buffered command(s) will be merged into it",
                len(self._sequence),
            )
        self._phase = TransactionPhase.IN_PROGRESS
        self._log("Begin transaction")

    def end(self) -> None:
        sequence = self._sequence
        self._reset()
        if sequence:
            self._commit(
                Command(
                    redo=partial(_replay_forward, sequence),
                    undo=partial(_replay_backward, sequence),
                    description=f"transaction of {len(sequence)} command(s)",
                )
            )
        self._log("End transaction")

    def cancel(self) -> None:
        _replay_backward(self._sequence)
        self._reset()
        self._log("Cancel transaction")

    def record(self, command: Command) -> None:
        self._sequence.append(command)
        self._log("Recording command in transaction: %s", command)

    def is_in_progress(self) -> bool:
        return self._phase is TransactionPhase.IN_PROGRESS

    def is_pending(self) -> bool:
        return self._phase is TransactionPhase.PENDING

    def __enter__(self) -> "TransactionRecorder":
        if self.is_in_progress():
            raise TransactionInProgressError("a transaction is already in progress")
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.end()
        else:
            self.cancel()
        return False

    def _reset(self) -> None:
        self._phase = TransactionPhase.PENDING
        self._sequence = []


__all__ = [
    "TransactionInProgressError",
    "TransactionPhase",
    "TransactionRecorder",
]
