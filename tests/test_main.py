"""Entry point tests for load/save and exit codes."""
import logging
import os
import tempfile
import unittest
from datetime import date
from pathlib import Path
from unittest import mock

from app import main as app_main
from core.errors import PersistenceIOError


def _confirm_exit(state):
    state.modal.request_close()
    state.modal.confirm_exit()


class MainTests(unittest.TestCase):
    """Validate startup import, shutdown export and exit codes."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.data_path = Path(self.temp_dir.name) / "weights.csv"
        os.environ["WEIGHT_TRACKER_DATA_PATH"] = str(self.data_path)
        patcher = mock.patch.object(app_main, "setup_logging")
        self.setup_logging = patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        os.environ.pop("WEIGHT_TRACKER_DATA_PATH", None)

    def test_clean_run_saves_and_returns_zero(self):
        self.data_path.write_text("Date, Weight\n24-04-2025, 89.9\n23-04-2025, 90.1\n", encoding="utf-8")
        seen = {}

        def fake_ui(state):
            seen["rows"] = len(state.store)
            seen["selection"] = state.selection
            _confirm_exit(state)

        with mock.patch.object(app_main, "run_ui", side_effect=fake_ui):
            self.assertEqual(app_main.main([]), 0)
        self.assertEqual(seen, {"rows": 2, "selection": 1})
        self.assertEqual(
            self.data_path.read_text(encoding="utf-8"),
            "Date, Weight\n23-04-2025, 90.1\n24-04-2025, 89.9\n",
        )

    def test_missing_file_starts_empty(self):
        with mock.patch.object(app_main, "run_ui", side_effect=_confirm_exit):
            self.assertEqual(app_main.main([]), 0)
        self.assertEqual(self.data_path.read_text(encoding="utf-8"), "Date, Weight\n")

    def test_data_flag_overrides_environment(self):
        other = Path(self.temp_dir.name) / "other.csv"
        with mock.patch.object(app_main, "run_ui", side_effect=_confirm_exit):
            self.assertEqual(app_main.main(["--data", str(other), "--log-level", "debug"]), 0)
        self.assertTrue(other.exists())
        self.assertFalse(self.data_path.exists())
        self.assertEqual(self.setup_logging.call_args.kwargs["level"], logging.DEBUG)

    def test_unreadable_file_exits_nonzero(self):
        self.data_path.mkdir()
        with mock.patch.object(app_main, "run_ui") as run_ui:
            self.assertEqual(app_main.main([]), 1)
        run_ui.assert_not_called()

    def test_save_failure_exits_nonzero(self):
        with mock.patch.object(app_main, "run_ui", side_effect=_confirm_exit), mock.patch.object(
            app_main, "save_store", side_effect=PersistenceIOError("disk full")
        ):
            self.assertEqual(app_main.main([]), 1)

    def test_crash_still_saves(self):
        def crash(state):
            state.store.append(date(2025, 1, 1), 80.0)
            raise RuntimeError("boom")

        with mock.patch.object(app_main, "run_ui", side_effect=crash):
            with self.assertRaises(RuntimeError):
                app_main.main([])
        self.assertIn("01-01-2025, 80.0", self.data_path.read_text(encoding="utf-8"))

    def test_interrupt_during_draw_still_saves(self):
        def interrupted(state):
            state.store.append(date(2025, 1, 1), 80.0)
            raise KeyboardInterrupt

        with mock.patch.object(app_main, "run_ui", side_effect=interrupted):
            self.assertEqual(app_main.main([]), 130)
        self.assertIn("01-01-2025, 80.0", self.data_path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
