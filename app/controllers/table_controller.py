import logging

from app.services.edit_buffer import EditBuffer
from app.services.message_banner import Severity
from core.validation import format_date

logger = logging.getLogger(__name__)


class TableController:
    def __init__(self, state):
        self.state = state

    def move_selection(self, delta):
        """Mutates: selection (clamped, no wraparound)."""
        state = self.state
        if not len(state.store):
            state.selection = None
            return
        current = state.selection if state.selection is not None else state.store.last_index()
        target = max(0, min(len(state.store) - 1, current + delta))
        state.selection = target

    def open_append(self):
        """Mutates: form, modal window."""
        state = self.state
        state.form = EditBuffer.for_append(state.today())
        state.modal.open_form()

    def open_edit(self):
        """Mutates: form, modal window. Does NOT mutate: store."""
        state = self.state
        if state.selection is None:
            state.post_message("Select an entry to edit first.", Severity.INFO)
            return
        state.form = EditBuffer.for_edit(state.selection, state.store[state.selection])
        state.modal.open_form()

    def press_delete(self):
        """First press arms, second press deletes. Mutates: store, selection."""
        state = self.state
        if state.selection is None:
            state.post_message("Nothing to delete.", Severity.INFO)
            return

        if not state.delete_armed:
            state.delete_armed_at = state.clock()
            day = format_date(state.store[state.selection].date)
            state.post_message(f"Press 'd' again to delete {day}.", Severity.WARNING)
            return

        state.disarm_delete()
        record = state.store.delete(state.selection)
        state.selection = state.store.last_index()
        message = f"Deleted {format_date(record.date)}."
        logger.info(message)
        state.post_message(message, Severity.INFO)
