"""Owned application context threaded through controllers and the UI loop."""
from __future__ import annotations

import time
from datetime import date
from enum import Enum

from app.services.app_config import AppConfig
from app.services.edit_buffer import EditBuffer
from app.services.message_banner import PendingMessage, Severity
from app.services.modal_state_machine import ModalStateMachine, ModalWindow
from app.services.scroll_scheduler import ScrollScheduler
from core.records import RecordStore
from core.windowing import ViewMode


class Frame(str, Enum):
    TABLE = "table"
    CHART = "chart"


class AppState:
    """UI and data state: store, modal window, selection, chart anchors, banner."""

    def __init__(self, store: RecordStore, config: AppConfig, clock=time.monotonic, today=date.today):
        self.store = store
        self.config = config
        self.clock = clock
        self.today = today

        self.modal = ModalStateMachine()
        self.frame = Frame.TABLE
        self.view_mode = ViewMode.MONTH
        start = today()
        self.anchors = {mode: start for mode in ViewMode}

        self.selection = store.last_index()
        self.form: EditBuffer | None = None
        self.message: PendingMessage | None = None
        self.delete_armed_at: float | None = None

        self.scroll = ScrollScheduler(dwell=config.scroll_dwell, step_period=config.frame_period)

    @property
    def window(self) -> ModalWindow:
        return self.modal.state

    @property
    def anchor(self) -> date:
        return self.anchors[self.view_mode]

    @property
    def delete_armed(self) -> bool:
        return self.delete_armed_at is not None

    def post_message(self, text: str, severity: Severity = Severity.INFO) -> None:
        self.message = PendingMessage(text, severity, self.clock())

    def clear_message(self) -> None:
        self.message = None

    def disarm_delete(self) -> None:
        self.delete_armed_at = None

