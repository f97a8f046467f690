"""View model tests for the renderable description of each window."""
import unittest

from app.app_state import Frame
from app.controllers import keys
from app.controllers.app_controller import AppController
from app.services.message_banner import Severity
from app.services.modal_state_machine import ModalWindow
from app.ui.view_model import build_view
from core.windowing import ViewMode
from helpers import make_state, make_store


class ViewModelTests(unittest.TestCase):
    def setUp(self):
        self.state = make_state(make_store(3))
        self.controller = AppController(self.state)

    def test_main_view(self):
        view = build_view(self.state)
        self.assertEqual(view.title, "Weight Tracker")
        self.assertEqual(view.window, ModalWindow.MAIN)
        self.assertEqual(view.frame, Frame.TABLE)
        self.assertEqual(view.rows[0], ("23-04-2025", "90.1"))
        self.assertEqual(view.selected, 2)
        self.assertEqual(view.chart.mode, ViewMode.MONTH)
        self.assertEqual(view.chart.title, "May 2025")
        self.assertIsNone(view.banner)
        self.assertIn("a: add entry", view.hint)
        self.assertEqual(view.form_fields, ())

    def test_chart_hint_and_mode(self):
        self.controller.handle_key(keys.TAB)
        self.controller.handle_key("h")
        view = build_view(self.state)
        self.assertEqual(view.frame, Frame.CHART)
        self.assertIn("h/l", view.hint)
        self.assertEqual(view.chart.title, "Apr 2025")
        self.assertEqual(len(view.chart.points), 3)

    def test_banner_and_form(self):
        self.controller.handle_key("a")
        self.controller.handle_key("x")
        self.controller.handle_key(keys.ENTER)
        view = build_view(self.state)
        self.assertEqual(view.window, ModalWindow.FORM)
        self.assertEqual(view.form_title, "Add entry")
        self.assertEqual(view.banner_severity, Severity.ERROR)
        date_field, weight_field = view.form_fields
        self.assertEqual(date_field.label, "Date")
        self.assertTrue(date_field.valid)
        self.assertFalse(date_field.focused)
        self.assertEqual(weight_field.text, "x")
        self.assertFalse(weight_field.valid)
        self.assertTrue(weight_field.focused)
        self.assertTrue(weight_field.editable)

    def test_edit_form_date_not_editable(self):
        self.controller.handle_key("e")
        view = build_view(self.state)
        self.assertEqual(view.form_title, "Edit entry")
        self.assertFalse(view.form_fields[0].editable)
        self.assertIn("new weight", view.hint)

    def test_visible_hint_uses_marquee_offset(self):
        self.controller.tick(hint_width=20)
        self.state.clock.advance(0.25)
        self.controller.tick(hint_width=20)
        view = build_view(self.state)
        self.assertEqual(view.hint_offset, 2)
        self.assertEqual(view.visible_hint(20), view.hint[2:22])


if __name__ == "__main__":
    unittest.main()
