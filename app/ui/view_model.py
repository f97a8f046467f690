"""Renderable description of the current state, independent of curses."""
from __future__ import annotations

from dataclasses import dataclass

from app.app_state import AppState, Frame
from app.services.edit_buffer import FormField, FormMode
from app.services.key_hints import hint_text
from app.services.message_banner import Severity
from app.services.modal_state_machine import ModalWindow
from core.validation import format_date, format_weight
from core.windowing import ChartWindow, compute_window

TITLE = "Weight Tracker"
TABLE_HEADER = ("Date", "Weight")


@dataclass(frozen=True)
class FieldView:
    label: str
    text: str
    cursor: int
    valid: bool
    focused: bool
    editable: bool


@dataclass(frozen=True)
class ViewModel:
    title: str
    window: ModalWindow
    frame: Frame
    rows: tuple[tuple[str, str], ...]
    selected: int | None
    chart: ChartWindow
    banner: str | None
    banner_severity: Severity | None
    hint: str
    hint_offset: int
    form_title: str | None = None
    form_fields: tuple[FieldView, ...] = ()

    def visible_hint(self, width: int) -> str:
        return self.hint[self.hint_offset:self.hint_offset + width]


def _form_fields(state: AppState) -> tuple[str | None, tuple[FieldView, ...]]:
    buffer = state.form
    if state.window != ModalWindow.FORM or buffer is None:
        return None, ()
    title = "Add entry" if buffer.mode == FormMode.APPEND else "Edit entry"
    fields = tuple(
        FieldView(
            label=name.value.capitalize(),
            text=buffer.fields[name].text,
            cursor=buffer.fields[name].cursor,
            valid=buffer.fields[name].valid,
            focused=buffer.focus == name,
            editable=buffer.mode == FormMode.APPEND or name == FormField.WEIGHT,
        )
        for name in FormField
    )
    return title, fields


def build_view(state: AppState) -> ViewModel:
    records = state.store.records
    message = state.message
    form_title, form_fields = _form_fields(state)
    return ViewModel(
        title=TITLE,
        window=state.window,
        frame=state.frame,
        rows=tuple((format_date(r.date), format_weight(r.weight)) for r in records),
        selected=state.selection,
        chart=compute_window(state.view_mode, state.anchor, records),
        banner=message.text if message else None,
        banner_severity=message.severity if message else None,
        hint=hint_text(state.window, state.frame, state.form.mode if state.form else None),
        hint_offset=state.scroll.state.offset,
        form_title=form_title,
        form_fields=form_fields,
    )
