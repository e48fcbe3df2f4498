"""Default configuration values."""

from __future__ import annotations

from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "history": {
        "limit": 100,
        "debug": False,
        "bind_hotkeys": False,
        "use_transactions": True,
    },
}
