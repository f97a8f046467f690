"""Explicit modal window state machine with strict transition controls."""
from __future__ import annotations

from enum import Enum


class ModalWindow(str, Enum):
    MAIN = "MAIN"
    CONFIRM_CLOSE = "CONFIRM_CLOSE"
    FORM = "FORM"


class InvalidTransition(RuntimeError):
    pass


class ModalStateMachine:
    def __init__(self):
        self._state = ModalWindow.MAIN
        self._exit_requested = False

    @property
    def state(self) -> ModalWindow:
        return self._state

    @property
    def exit_requested(self) -> bool:
        return self._exit_requested

    def _transition(self, expected: set[ModalWindow], new_state: ModalWindow) -> ModalWindow:
        if self._state not in expected:
            raise InvalidTransition(f"Cannot transition {self._state} -> {new_state}")
        self._state = new_state
        return self._state

    def request_close(self) -> ModalWindow:
        return self._transition({ModalWindow.MAIN}, ModalWindow.CONFIRM_CLOSE)

    def open_form(self) -> ModalWindow:
        return self._transition({ModalWindow.MAIN}, ModalWindow.FORM)

    def return_to_main(self) -> ModalWindow:
        return self._transition({ModalWindow.CONFIRM_CLOSE, ModalWindow.FORM}, ModalWindow.MAIN)

    def confirm_exit(self) -> ModalWindow:
        if self._state != ModalWindow.CONFIRM_CLOSE:
            raise InvalidTransition(f"Cannot exit from {self._state}")
        self._exit_requested = True
        return self._state
