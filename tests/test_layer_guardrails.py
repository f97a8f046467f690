"""Guardrails keeping terminal I/O out of the core and service layers."""

from pathlib import Path
import unittest

ROOT = Path(__file__).resolve().parent.parent


class LayerGuardrailsTests(unittest.TestCase):
    def test_no_curses_outside_ui(self):
        forbidden = {"import curses", "from curses"}
        for folder in ("core", "app/services", "app/controllers"):
            for file_path in (ROOT / folder).glob("*.py"):
                text = file_path.read_text(encoding="utf-8")
                for token in forbidden:
                    self.assertNotIn(token, text, msg=f"Forbidden token {token!r} in {file_path}")

    def test_core_does_not_depend_on_app(self):
        for file_path in (ROOT / "core").glob("*.py"):
            text = file_path.read_text(encoding="utf-8")
            self.assertNotIn("from app", text, msg=f"{file_path} imports the app layer")


if __name__ == "__main__":
    unittest.main()
