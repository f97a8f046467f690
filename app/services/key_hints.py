"""Key hint line for the active window."""
from __future__ import annotations

from app.services.edit_buffer import FormMode
from app.services.modal_state_machine import ModalWindow

_MAIN_COMMON = "Tab: switch table/chart | Esc/q: quit"
_TABLE_HINTS = "j/k: select row | a: add entry | e: edit weight | d d: delete row"
_CHART_HINTS = "j/k: cycle month/year/rolling year | h/l: move window back/forward"
_CONFIRM_HINTS = "Quit and save? y/Enter: yes | n/Esc: no"
_APPEND_HINTS = "Type DD-MM-YYYY and weight | Tab: switch field | Enter: save | Esc: cancel"
_EDIT_HINTS = "Type the new weight | Enter: save | Esc: cancel"


def hint_text(window: ModalWindow, frame: str, form_mode: FormMode | None = None) -> str:
    if window == ModalWindow.CONFIRM_CLOSE:
        return _CONFIRM_HINTS
    if window == ModalWindow.FORM:
        return _EDIT_HINTS if form_mode == FormMode.EDIT else _APPEND_HINTS
    local = _CHART_HINTS if frame == "chart" else _TABLE_HINTS
    return f"{local} | {_MAIN_COMMON}"
