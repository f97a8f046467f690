"""Runtime configuration: data path and UI timings, overridable by environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from core.storage import records_path

DEFAULT_FRAME_PERIOD = 0.1
DEFAULT_MESSAGE_TIMEOUT = 3.0
DEFAULT_DELETE_CONFIRM_TIMEOUT = 3.0
DEFAULT_SCROLL_DWELL = 1.0


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class AppConfig:
    data_path: Path
    frame_period: float = DEFAULT_FRAME_PERIOD
    message_timeout: float = DEFAULT_MESSAGE_TIMEOUT
    delete_confirm_timeout: float = DEFAULT_DELETE_CONFIRM_TIMEOUT
    scroll_dwell: float = DEFAULT_SCROLL_DWELL

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(
            data_path=records_path(),
            frame_period=_env_float("WEIGHT_TRACKER_FRAME_PERIOD", DEFAULT_FRAME_PERIOD),
            message_timeout=_env_float("WEIGHT_TRACKER_MESSAGE_TIMEOUT", DEFAULT_MESSAGE_TIMEOUT),
        )

    def with_data_path(self, path) -> "AppConfig":
        return replace(self, data_path=Path(path))
