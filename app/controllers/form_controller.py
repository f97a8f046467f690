import logging

from app.services.edit_buffer import FormMode
from app.services.message_banner import Severity
from core.errors import DuplicateDate
from core.validation import format_date, format_weight, parse_date, parse_weight

logger = logging.getLogger(__name__)


class FormController:
    def __init__(self, state):
        self.state = state

    @property
    def buffer(self):
        return self.state.form

    def type_char(self, ch):
        self.buffer.insert(ch)

    def backspace(self):
        self.buffer.backspace()

    def move_cursor(self, delta):
        self.buffer.move_cursor(delta)

    def toggle_focus(self):
        self.buffer.toggle_focus()

    def cancel(self):
        """Mutates: form (discarded), modal window."""
        self.state.form = None
        self.state.modal.return_to_main()

    def submit(self):
        """
        Mutates: store, selection, form, modal window.
        On failure the form stays open.
        """
        state = self.state
        buffer = self.buffer
        invalid = buffer.invalid_fields()
        if invalid:
            message = f"Invalid {' and '.join(name.value for name in invalid)}."
            state.post_message(message, Severity.ERROR)
            return

        day = parse_date(buffer.date.text)
        weight = parse_weight(buffer.weight.text)
        if buffer.mode == FormMode.APPEND:
            try:
                state.selection = state.store.append(day, weight)
            except DuplicateDate as exc:
                logger.info("Rejected append: %s", exc)
                state.post_message(f"{exc}.", Severity.ERROR)
                return
            message = f"Added {format_date(day)}: {format_weight(weight)}."
        else:
            state.store.edit(buffer.row_index, weight)
            state.selection = buffer.row_index
            message = f"Updated {format_date(day)}: {format_weight(weight)}."

        state.form = None
        state.modal.return_to_main()
        state.post_message(message, Severity.INFO)
