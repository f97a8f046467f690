"""Modal window state machine transition tests."""
import unittest

from app.services.modal_state_machine import InvalidTransition, ModalStateMachine, ModalWindow


class ModalStateMachineTests(unittest.TestCase):
    def test_initial_state(self):
        machine = ModalStateMachine()
        self.assertEqual(machine.state, ModalWindow.MAIN)
        self.assertFalse(machine.exit_requested)

    def test_close_confirm_cycle(self):
        machine = ModalStateMachine()
        machine.request_close()
        self.assertEqual(machine.state, ModalWindow.CONFIRM_CLOSE)
        machine.return_to_main()
        self.assertEqual(machine.state, ModalWindow.MAIN)
        machine.request_close()
        machine.confirm_exit()
        self.assertTrue(machine.exit_requested)

    def test_form_cycle(self):
        machine = ModalStateMachine()
        machine.open_form()
        self.assertEqual(machine.state, ModalWindow.FORM)
        machine.return_to_main()
        self.assertEqual(machine.state, ModalWindow.MAIN)

    def test_invalid_transitions(self):
        machine = ModalStateMachine()
        with self.assertRaises(InvalidTransition):
            machine.return_to_main()
        with self.assertRaises(InvalidTransition):
            machine.confirm_exit()
        machine.open_form()
        with self.assertRaises(InvalidTransition):
            machine.request_close()
        with self.assertRaises(InvalidTransition):
            machine.open_form()
        self.assertFalse(machine.exit_requested)


if __name__ == "__main__":
    unittest.main()
