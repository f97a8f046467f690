"""Bounded oscillating marquee offset for text wider than its display area."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ScrollDirection(str, Enum):
    FORWARD = "forward"
    REVERSE = "reverse"


@dataclass
class ScrollState:
    offset: int = 0
    direction: ScrollDirection = ScrollDirection.FORWARD
    pause_until: float | None = None
    next_step_at: float | None = None


class ScrollScheduler:
    """Advance one column per step period, reverse at either end and dwell there.

    Movement depends only on the `now` passed to tick(), so extra ticks caused
    by key input never speed the marquee up.
    """

    def __init__(self, dwell: float = 1.0, step_period: float = 0.1):
        self.dwell = dwell
        self.step_period = step_period
        self.state = ScrollState()
        self._length = 0
        self._width = 0

    @property
    def max_offset(self) -> int:
        return max(0, self._length - self._width)

    def reset(self, length: int, width: int) -> None:
        self._length = max(0, length)
        self._width = max(0, width)
        self.state = ScrollState()

    def tick(self, now: float, length: int, width: int) -> int:
        """Advance if a step is due at `now` and return the offset to draw with."""
        if (length, width) != (self._length, self._width):
            self.reset(length, width)
        if self.max_offset == 0:
            return 0

        state = self.state
        if state.pause_until is not None:
            if now < state.pause_until:
                return state.offset
            state.pause_until = None
        elif state.next_step_at is not None and now < state.next_step_at:
            return state.offset

        state.next_step_at = now + self.step_period
        if state.direction == ScrollDirection.FORWARD:
            state.offset += 1
            if state.offset >= self.max_offset:
                state.offset = self.max_offset
                state.direction = ScrollDirection.REVERSE
                state.pause_until = now + self.dwell
        else:
            state.offset -= 1
            if state.offset <= 0:
                state.offset = 0
                state.direction = ScrollDirection.FORWARD
                state.pause_until = now + self.dwell
        return state.offset
