"""Terminal surface tests against a fake curses window."""
import curses
import unittest
from unittest import mock

from app.controllers import keys
from app.ui.app_shell import AppShell
from app.ui.key_input import normalize_key
from app.ui.theme import Styles
from app.ui.view_model import build_view
from helpers import make_state, make_store


class FakeWindow:
    """Minimal stand-in for a curses window that records drawn text."""

    def __init__(self, height=24, width=80, pending_keys=()):
        self.height = height
        self.width = width
        self.cells = {}
        self.pending_keys = list(pending_keys)
        self.timeout_ms = None

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.cells.clear()

    def addnstr(self, y, x, text, n, attr=0):
        for i, ch in enumerate(text[:n]):
            self.cells[(y, x + i)] = ch

    def line(self, y):
        return "".join(self.cells.get((y, x), " ") for x in range(self.width))

    def screen(self):
        return "\n".join(self.line(y) for y in range(self.height))

    def noutrefresh(self):
        pass

    def move(self, y, x):
        pass

    def keypad(self, flag):
        pass

    def timeout(self, ms):
        self.timeout_ms = ms

    def get_wch(self):
        if not self.pending_keys:
            raise curses.error("no input")
        return self.pending_keys.pop(0)


@mock.patch("curses.doupdate")
@mock.patch("curses.curs_set")
class AppShellDrawTests(unittest.TestCase):
    def setUp(self):
        self.state = make_state(make_store(3))
        self.window = FakeWindow()
        self.shell = AppShell(self.window, self.state)

    def test_main_screen(self, *_):
        self.shell.draw(build_view(self.state))
        screen = self.window.screen()
        self.assertIn("Weight Tracker", screen)
        self.assertIn("23-04-2025", screen)
        self.assertIn("→", screen)
        self.assertIn("May 2025", screen)
        self.assertIn("01", self.window.screen())

    def test_confirm_popup(self, *_):
        self.shell.controller.handle_key(keys.ESC)
        self.shell.draw(build_view(self.state))
        self.assertIn("Save and quit? (y/n)", self.window.screen())

    def test_form_popup(self, *_):
        self.shell.controller.handle_key("a")
        self.shell.draw(build_view(self.state))
        screen = self.window.screen()
        self.assertIn("Add entry", screen)
        self.assertIn("19-05-2025", screen)

    def test_empty_chart_window_shows_placeholder(self, *_):
        self.shell.draw(build_view(self.state))
        self.assertIn("No entries in this window", self.window.screen())

        self.shell.controller.handle_key(keys.TAB)
        self.shell.controller.handle_key("h")
        self.shell.draw(build_view(self.state))
        screen = self.window.screen()
        self.assertIn("Apr 2025", screen)
        self.assertNotIn("No entries in this window", screen)
        self.assertIn("█", screen)

    def test_tiny_terminal_does_not_crash(self, *_):
        shell = AppShell(FakeWindow(height=5, width=10), self.state)
        shell.draw(build_view(self.state))


@mock.patch("curses.doupdate")
@mock.patch("curses.curs_set")
@mock.patch.object(Styles, "init")
class AppShellLoopTests(unittest.TestCase):
    def test_run_until_exit_confirmed(self, *_):
        """Idle ticks keep the loop alive; Esc then y ends it."""
        state = make_state()
        window = FakeWindow(pending_keys=["j", "\x1b", "y"])
        AppShell(window, state).run()
        self.assertTrue(state.modal.exit_requested)
        self.assertEqual(window.timeout_ms, 100)

    def test_keyboard_interrupt_opens_confirm(self, *_):
        state = make_state()
        shell = AppShell(FakeWindow(), state)
        with mock.patch.object(shell.stdscr, "get_wch", side_effect=KeyboardInterrupt):
            self.assertEqual(shell.read_key(), keys.CTRL_C)
        self.assertIsNone(shell.read_key())


class KeyInputTests(unittest.TestCase):
    def test_normalize(self):
        self.assertEqual(normalize_key("\x1b"), keys.ESC)
        self.assertEqual(normalize_key("\t"), keys.TAB)
        self.assertEqual(normalize_key("\n"), keys.ENTER)
        self.assertEqual(normalize_key(curses.KEY_ENTER), keys.ENTER)
        self.assertEqual(normalize_key("\x7f"), keys.BACKSPACE)
        self.assertEqual(normalize_key(curses.KEY_BACKSPACE), keys.BACKSPACE)
        self.assertEqual(normalize_key(curses.KEY_LEFT), keys.LEFT)
        self.assertEqual(normalize_key("j"), "j")
        self.assertEqual(normalize_key("5"), "5")
        self.assertIsNone(normalize_key(curses.KEY_RESIZE))
        self.assertIsNone(normalize_key("\x01"))


if __name__ == "__main__":
    unittest.main()
