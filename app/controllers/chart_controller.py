from core.windowing import step_anchor


class ChartController:
    def __init__(self, state):
        self.state = state

    def cycle_mode(self, forward=True):
        """Mutates: view_mode. Does NOT mutate: anchors."""
        state = self.state
        state.view_mode = state.view_mode.next() if forward else state.view_mode.previous()

    def step(self, steps):
        """Mutates: anchor of the active view mode only."""
        state = self.state
        mode = state.view_mode
        state.anchors[mode] = step_anchor(mode, state.anchors[mode], steps)
