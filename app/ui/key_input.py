"""Translate curses get_wch() results into controller key names."""
import curses

from app.controllers import keys

_SPECIAL_CHARS = {
    "\x1b": keys.ESC,
    "\t": keys.TAB,
    "\n": keys.ENTER,
    "\r": keys.ENTER,
    "\x7f": keys.BACKSPACE,
    "\b": keys.BACKSPACE,
    "\x03": keys.CTRL_C,
}

_SPECIAL_CODES = {
    curses.KEY_ENTER: keys.ENTER,
    curses.KEY_BACKSPACE: keys.BACKSPACE,
    curses.KEY_UP: keys.UP,
    curses.KEY_DOWN: keys.DOWN,
    curses.KEY_LEFT: keys.LEFT,
    curses.KEY_RIGHT: keys.RIGHT,
}


def normalize_key(raw):
    """Return the logical key name, or None for keys nothing handles (resize, F-keys)."""
    if isinstance(raw, int):
        return _SPECIAL_CODES.get(raw)
    if raw in _SPECIAL_CHARS:
        return _SPECIAL_CHARS[raw]
    if keys.is_printable(raw):
        return raw
    return None
