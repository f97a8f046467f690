"""Key dispatch by modal window plus per-tick housekeeping."""
import logging

from app.app_state import Frame
from app.controllers import keys
from app.controllers.chart_controller import ChartController
from app.controllers.form_controller import FormController
from app.controllers.table_controller import TableController
from app.services.key_hints import hint_text
from app.services.modal_state_machine import ModalWindow

logger = logging.getLogger(__name__)

_CLOSE_KEYS = {keys.ESC, keys.CTRL_C, "q"}
_NEXT_KEYS = {"j", keys.DOWN}
_PREV_KEYS = {"k", keys.UP}


class AppController:
    def __init__(self, state):
        self.state = state
        self.table = TableController(state)
        self.chart = ChartController(state)
        self.form = FormController(state)

    def current_hint(self) -> str:
        state = self.state
        form_mode = state.form.mode if state.form is not None else None
        return hint_text(state.window, state.frame, form_mode)

    def tick(self, now=None, hint_width=None) -> int:
        """Expire banner and pending delete, advance the hint marquee. Returns the marquee offset."""
        state = self.state
        now = state.clock() if now is None else now
        if state.message is not None and state.message.is_expired(now, state.config.message_timeout):
            state.clear_message()
        if state.delete_armed and now - state.delete_armed_at >= state.config.delete_confirm_timeout:
            logger.debug("Delete confirmation timed out")
            state.disarm_delete()
        if hint_width is None:
            return state.scroll.state.offset
        return state.scroll.tick(now, len(self.current_hint()), hint_width)

    def handle_key(self, key) -> bool:
        """Route one key to the active window. Returns True when the key was consumed."""
        state = self.state
        window = state.window
        if not (window == ModalWindow.MAIN and state.frame == Frame.TABLE and key == "d"):
            state.disarm_delete()

        if window == ModalWindow.MAIN:
            return self._handle_main(key)
        if window == ModalWindow.CONFIRM_CLOSE:
            return self._handle_confirm(key)
        return self._handle_form(key)

    def _handle_main(self, key) -> bool:
        state = self.state
        if key in _CLOSE_KEYS:
            state.modal.request_close()
            return True
        if key == keys.TAB:
            state.frame = Frame.CHART if state.frame == Frame.TABLE else Frame.TABLE
            return True
        if state.frame == Frame.TABLE:
            return self._handle_table(key)
        return self._handle_chart(key)

    def _handle_table(self, key) -> bool:
        if key in _NEXT_KEYS:
            self.table.move_selection(1)
        elif key in _PREV_KEYS:
            self.table.move_selection(-1)
        elif key == "a":
            self.table.open_append()
        elif key == "e":
            self.table.open_edit()
        elif key == "d":
            self.table.press_delete()
        else:
            return False
        return True

    def _handle_chart(self, key) -> bool:
        if key in _NEXT_KEYS:
            self.chart.cycle_mode(forward=True)
        elif key in _PREV_KEYS:
            self.chart.cycle_mode(forward=False)
        elif key in ("h", keys.LEFT):
            self.chart.step(-1)
        elif key in ("l", keys.RIGHT):
            self.chart.step(1)
        else:
            return False
        return True

    def _handle_confirm(self, key) -> bool:
        state = self.state
        if key in ("y", keys.ENTER):
            logger.info("Exit confirmed")
            state.modal.confirm_exit()
        elif key in ("n", keys.ESC):
            state.modal.return_to_main()
        else:
            return False
        return True

    def _handle_form(self, key) -> bool:
        if key == keys.ESC:
            self.form.cancel()
        elif key == keys.ENTER:
            self.form.submit()
        elif key == keys.TAB:
            self.form.toggle_focus()
        elif key == keys.BACKSPACE:
            self.form.backspace()
        elif key == keys.LEFT:
            self.form.move_cursor(-1)
        elif key == keys.RIGHT:
            self.form.move_cursor(1)
        elif keys.is_printable(key):
            self.form.type_char(key)
        else:
            return False
        return True
