"""Logical key names dispatched by the controllers.

Printable characters are passed through as themselves ("a", "7", "-").
"""
ESC = "esc"
TAB = "tab"
ENTER = "enter"
BACKSPACE = "backspace"
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
CTRL_C = "ctrl-c"


def is_printable(key: str) -> bool:
    return len(key) == 1 and key.isprintable()
