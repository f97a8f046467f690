"""Color pairs for the terminal surface."""
import curses

from app.services.message_banner import Severity


class Colors:
    """curses color pair ids."""

    DEFAULT = 0
    TITLE = 1
    HEADER = 2
    SELECTED = 3
    CHART = 4
    DIMMED = 5
    INFO = 6
    WARNING = 7
    ERROR = 8


_PAIRS = {
    Colors.TITLE: (curses.COLOR_CYAN, -1),
    Colors.HEADER: (curses.COLOR_BLACK, curses.COLOR_BLUE),
    Colors.SELECTED: (curses.COLOR_WHITE, curses.COLOR_BLACK),
    Colors.CHART: (curses.COLOR_BLUE, -1),
    Colors.DIMMED: (curses.COLOR_WHITE, -1),
    Colors.INFO: (curses.COLOR_GREEN, -1),
    Colors.WARNING: (curses.COLOR_YELLOW, -1),
    Colors.ERROR: (curses.COLOR_RED, -1),
}

_SEVERITY_PAIRS = {
    Severity.INFO: Colors.INFO,
    Severity.WARNING: Colors.WARNING,
    Severity.ERROR: Colors.ERROR,
}


class Styles:
    """Text attributes built from the color pairs (plain attributes without color support)."""

    enabled = False

    @classmethod
    def init(cls):
        if not curses.has_colors():
            return
        curses.start_color()
        try:
            curses.use_default_colors()
        except curses.error:
            pass
        for pair_id, (fg, bg) in _PAIRS.items():
            curses.init_pair(pair_id, fg, bg)
        cls.enabled = True

    @classmethod
    def pair(cls, pair_id, extra=0):
        if not cls.enabled:
            return extra
        return curses.color_pair(pair_id) | extra

    @classmethod
    def title(cls):
        return cls.pair(Colors.TITLE, curses.A_BOLD)

    @classmethod
    def header(cls):
        return cls.pair(Colors.HEADER, curses.A_BOLD)

    @classmethod
    def selected_row(cls):
        return cls.pair(Colors.SELECTED, curses.A_REVERSE)

    @classmethod
    def chart(cls):
        return cls.pair(Colors.CHART)

    @classmethod
    def frame(cls, active):
        return curses.A_BOLD if active else cls.pair(Colors.DIMMED, curses.A_DIM)

    @classmethod
    def banner(cls, severity):
        return cls.pair(_SEVERITY_PAIRS.get(severity, Colors.INFO), curses.A_BOLD)

    @classmethod
    def field(cls, valid, focused):
        attr = curses.A_UNDERLINE if focused else 0
        if not valid:
            return cls.pair(Colors.ERROR, attr | curses.A_BOLD)
        return attr
