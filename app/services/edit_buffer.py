"""Append/edit form buffer: two text fields with live validity flags."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from core.records import Record
from core.validation import format_date, format_weight, is_valid_date, is_valid_weight


class FormMode(str, Enum):
    APPEND = "append"
    EDIT = "edit"


class FormField(str, Enum):
    DATE = "date"
    WEIGHT = "weight"


_VALIDATORS = {
    FormField.DATE: is_valid_date,
    FormField.WEIGHT: is_valid_weight,
}


@dataclass
class TextField:
    text: str = ""
    cursor: int = 0
    valid: bool = False

    def insert(self, ch: str) -> None:
        self.text = self.text[: self.cursor] + ch + self.text[self.cursor:]
        self.cursor += len(ch)

    def backspace(self) -> None:
        if self.cursor == 0:
            return
        self.text = self.text[: self.cursor - 1] + self.text[self.cursor:]
        self.cursor -= 1

    def move_cursor(self, delta: int) -> None:
        self.cursor = max(0, min(len(self.text), self.cursor + delta))


def _seeded(text: str) -> TextField:
    return TextField(text=text, cursor=len(text))


@dataclass
class EditBuffer:
    mode: FormMode
    date: TextField
    weight: TextField
    focus: FormField = FormField.WEIGHT
    row_index: int | None = None
    fields: dict = field(init=False, repr=False)

    def __post_init__(self):
        self.fields = {FormField.DATE: self.date, FormField.WEIGHT: self.weight}
        self.revalidate()

    @classmethod
    def for_append(cls, today: date) -> "EditBuffer":
        return cls(FormMode.APPEND, _seeded(format_date(today)), TextField())

    @classmethod
    def for_edit(cls, row_index: int, record: Record) -> "EditBuffer":
        return cls(
            FormMode.EDIT,
            _seeded(format_date(record.date)),
            _seeded(format_weight(record.weight)),
            row_index=row_index,
        )

    @property
    def focused(self) -> TextField:
        return self.fields[self.focus]

    def toggle_focus(self) -> bool:
        """Swap focused field. Edit mode keeps focus on weight."""
        if self.mode != FormMode.APPEND:
            return False
        self.focus = FormField.DATE if self.focus == FormField.WEIGHT else FormField.WEIGHT
        return True

    def insert(self, ch: str) -> None:
        self.focused.insert(ch)
        self.revalidate(self.focus)

    def backspace(self) -> None:
        self.focused.backspace()
        self.revalidate(self.focus)

    def move_cursor(self, delta: int) -> None:
        self.focused.move_cursor(delta)

    def revalidate(self, which: FormField | None = None) -> None:
        targets = [which] if which is not None else list(FormField)
        for name in targets:
            text_field = self.fields[name]
            text_field.valid = _VALIDATORS[name](text_field.text)

    def invalid_fields(self) -> list[FormField]:
        self.revalidate()
        return [name for name in FormField if not self.fields[name].valid]
