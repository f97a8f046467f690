"""Transient banner messages with severity and auto-expiry."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class PendingMessage:
    text: str
    severity: Severity
    created_at: float

    def is_expired(self, now: float, timeout: float) -> bool:
        return now - self.created_at >= timeout
