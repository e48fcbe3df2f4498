"""In-memory undo/redo history with transactions."""

from __future__ import annotations

from rewind.core.command import Command
from rewind.core.config import DEFAULT_CONFIG, UndoSettings, load_settings
from rewind.core.history import UndoManager
from rewind.core.transaction import TransactionInProgressError, TransactionPhase, TransactionRecorder

__all__ = [
    "Command",
    "DEFAULT_CONFIG",
    "TransactionInProgressError",
    "TransactionPhase",
    "TransactionRecorder",
    "UndoManager",
    "UndoSettings",
    "load_settings",
]
