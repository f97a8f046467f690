"""curses surface: draws a ViewModel and feeds keys back to the AppController."""
import curses
import logging

from app.app_state import Frame
from app.controllers import keys
from app.controllers.app_controller import AppController
from app.services.modal_state_machine import ModalWindow
from app.ui.key_input import normalize_key
from app.ui.theme import Styles
from app.ui.view_model import TABLE_HEADER, ViewModel, build_view

logger = logging.getLogger(__name__)

TITLE_HEIGHT = 3
HINT_HEIGHT = 3
TABLE_WIDTH = 21
Y_LABEL_WIDTH = 7
SELECT_SYMBOL = "→"
BAR = "█"
EMPTY_CHART_TEXT = "No entries in this window"


def put(win, y, x, text, attr=0):
    """addnstr clipped to the window; writes outside it are dropped."""
    height, width = win.getmaxyx()
    if y < 0 or y >= height or x < 0 or x >= width or not text:
        return
    try:
        win.addnstr(y, x, text, width - x, attr)
    except curses.error:
        # Writing the bottom-right cell moves the cursor off-screen
        pass


def draw_box(win, top, left, height, width, attr=0, title=None):
    if height < 2 or width < 2:
        return
    bottom, right = top + height - 1, left + width - 1
    put(win, top, left, "┌" + "─" * (width - 2) + "┐", attr)
    for y in range(top + 1, bottom):
        put(win, y, left, "│", attr)
        put(win, y, right, "│", attr)
    put(win, bottom, left, "└" + "─" * (width - 2) + "┘", attr)
    if title:
        label = f" {title} "[: max(0, width - 2)]
        put(win, top, left + max(1, (width - len(label)) // 2), label, attr | Styles.title())


def clear_area(win, top, left, height, width):
    for y in range(top, top + height):
        put(win, y, left, " " * width)


class AppShell:
    def __init__(self, stdscr, state):
        self.stdscr = stdscr
        self.state = state
        self.controller = AppController(state)

    # ---- loop ----
    def run(self):
        curses.curs_set(0)
        Styles.init()
        self.stdscr.keypad(True)
        self.stdscr.timeout(max(1, int(self.state.config.frame_period * 1000)))
        logger.info("UI started")

        while not self.state.modal.exit_requested:
            _, width = self.stdscr.getmaxyx()
            self.controller.tick(hint_width=max(0, width - 2))
            self.draw(build_view(self.state))
            key = self.read_key()
            if key is not None:
                self.controller.handle_key(key)
        logger.info("UI closed")

    def read_key(self):
        try:
            raw = self.stdscr.get_wch()
        except curses.error:
            return None  # frame timeout
        except KeyboardInterrupt:
            return keys.CTRL_C
        return normalize_key(raw)

    # ---- drawing ----
    def draw(self, view: ViewModel):
        win = self.stdscr
        win.erase()
        height, width = win.getmaxyx()
        middle_height = max(0, height - TITLE_HEIGHT - HINT_HEIGHT - 1)

        self.draw_title(view, width)
        table_width = min(TABLE_WIDTH, width)
        self.draw_table(view, TITLE_HEIGHT, 0, middle_height, table_width)
        self.draw_chart(view, TITLE_HEIGHT, table_width, middle_height, width - table_width)
        self.draw_banner(view, TITLE_HEIGHT + middle_height, width)
        self.draw_hints(view, height - HINT_HEIGHT, width)

        curses.curs_set(0)
        if view.window == ModalWindow.CONFIRM_CLOSE:
            self.draw_confirm(height, width)
        elif view.window == ModalWindow.FORM:
            self.draw_form(view, height, width)
        win.noutrefresh()
        curses.doupdate()

    def draw_title(self, view, width):
        draw_box(self.stdscr, 0, 0, TITLE_HEIGHT, width)
        put(self.stdscr, 1, max(1, (width - len(view.title)) // 2), view.title, Styles.title())

    def draw_table(self, view, top, left, height, width):
        win = self.stdscr
        active = view.frame == Frame.TABLE
        draw_box(win, top, left, height, width, Styles.frame(active))
        inner = width - 2
        if height < 4 or inner < 2:
            return
        header = f"{TABLE_HEADER[0]:^12}{TABLE_HEADER[1]:^7}"
        put(win, top + 1, left + 1, header[:inner].ljust(inner), Styles.header())

        visible = height - 4
        first = 0
        if view.selected is not None and view.selected >= visible:
            first = view.selected - visible + 1
        for line, index in enumerate(range(first, min(len(view.rows), first + visible))):
            day, weight = view.rows[index]
            selected = index == view.selected
            marker = SELECT_SYMBOL if selected else " "
            text = f"{marker}{day:^11}{weight:>7}"
            put(win, top + 3 + line, left + 1, text[:inner], Styles.selected_row() if selected else 0)

    def draw_chart(self, view, top, left, height, width):
        win = self.stdscr
        chart = view.chart
        active = view.frame == Frame.CHART
        draw_box(win, top, left, height, width, Styles.frame(active), title=chart.title)

        plot_top = top + 1
        plot_left = left + 1 + Y_LABEL_WIDTH
        plot_height = height - 3
        plot_width = width - 2 - Y_LABEL_WIDTH
        if plot_height < 2 or plot_width < 2:
            return

        put(win, plot_top, left + 1, chart.y_labels[1].rjust(Y_LABEL_WIDTH - 1), curses.A_BOLD)
        put(win, plot_top + plot_height - 1, left + 1, chart.y_labels[0].rjust(Y_LABEL_WIDTH - 1), curses.A_BOLD)
        for y in range(plot_top, plot_top + plot_height):
            put(win, y, plot_left - 1, "│")

        if chart.is_empty:
            text_left = plot_left + max(0, (plot_width - len(EMPTY_CHART_TEXT)) // 2)
            put(win, plot_top + plot_height // 2, text_left, EMPTY_CHART_TEXT[:plot_width])
        else:
            self.draw_bars(chart, plot_top, plot_left, plot_height, plot_width)

        self.draw_x_labels(chart.x_labels, plot_top + plot_height, plot_left, plot_width)

    def draw_bars(self, chart, top, left, height, width):
        span = max(chart.delta, 1)
        value_span = chart.y_max - chart.y_min
        for x, weight in chart.points:
            column = left + round(x / span * (width - 1))
            fill = (weight - chart.y_min) / value_span if value_span > 0 else 0.0
            bar_height = max(1, round(fill * height))
            for row in range(bar_height):
                put(self.stdscr, top + height - 1 - row, column, BAR, Styles.chart())

    def draw_x_labels(self, labels, y, left, width):
        if not labels:
            return
        count = len(labels)
        for i, label in enumerate(labels):
            anchor = left + (round(i * (width - 1) / (count - 1)) if count > 1 else 0)
            x = anchor - len(label) + 1 if i == count - 1 else anchor
            put(self.stdscr, y, max(left, x), label)

    def draw_banner(self, view, y, width):
        if view.banner:
            put(self.stdscr, y, 1, view.banner[: max(0, width - 2)], Styles.banner(view.banner_severity))

    def draw_hints(self, view, top, width):
        draw_box(self.stdscr, top, 0, HINT_HEIGHT, width)
        put(self.stdscr, top + 1, 1, view.visible_hint(max(0, width - 2)))

    def draw_confirm(self, height, width):
        text = "Save and quit? (y/n)"
        box_width = min(width, len(text) + 4)
        top, left = max(0, (height - 3) // 2), max(0, (width - box_width) // 2)
        clear_area(self.stdscr, top, left, 3, box_width)
        draw_box(self.stdscr, top, left, 3, box_width, curses.A_BOLD, title="Quit")
        put(self.stdscr, top + 1, left + 2, text)

    def draw_form(self, view, height, width):
        label_width = max(len(f.label) for f in view.form_fields) + 2
        box_width = min(width, label_width + 20)
        box_height = len(view.form_fields) + 2
        top, left = max(0, (height - box_height) // 2), max(0, (width - box_width) // 2)
        clear_area(self.stdscr, top, left, box_height, box_width)
        draw_box(self.stdscr, top, left, box_height, box_width, curses.A_BOLD, title=view.form_title)

        cursor_at = None
        for i, field in enumerate(view.form_fields):
            y = top + 1 + i
            put(self.stdscr, y, left + 2, f"{field.label}:")
            attr = Styles.field(field.valid, field.focused)
            if not field.editable:
                attr |= curses.A_DIM
            x = left + 2 + label_width
            put(self.stdscr, y, x, field.text.ljust(12), attr)
            if field.focused:
                cursor_at = (y, x + field.cursor)
        if cursor_at is not None:
            try:
                curses.curs_set(1)
                self.stdscr.move(*cursor_at)
            except curses.error:
                pass
