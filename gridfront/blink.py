"""Cursor blink state machine."""

from __future__ import annotations

import copy
import enum
import time
from dataclasses import dataclass
from typing import Any, Callable


class BlinkState(enum.Enum):
    WAITING = "waiting"
    ON = "on"
    OFF = "off"


@dataclass(frozen=True)
class BlinkTiming:
    """Blink intervals of a cursor in milliseconds; None means no blinking phase."""

    blinkwait: int | None = None
    blinkon: int | None = None
    blinkoff: int | None = None


class BlinkStatus:
    """Tracks whether a blinking cursor is currently visible.

    ``update_status`` accepts any cursor object with ``blinkwait``, ``blinkon``
    and ``blinkoff`` attributes that supports equality. ``schedule`` is called
    with the clock time at which the next blink transition is due.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        schedule: Callable[[float], None] | None = None,
    ) -> None:
        self._clock = clock
        self._schedule = schedule
        self._state = BlinkState.WAITING
        self._last_transition = clock()
        self._previous_cursor: Any = None

    @property
    def state(self) -> BlinkState:
        return self._state

    def _delay_for_state(self, cursor: Any) -> int | None:
        if self._state is BlinkState.WAITING:
            return cursor.blinkwait
        if self._state is BlinkState.OFF:
            return cursor.blinkoff
        return cursor.blinkon

    def update_status(self, new_cursor: Any) -> bool:
        """Advance the blink state and return whether the cursor should be drawn."""
        if self._previous_cursor is None or new_cursor != self._previous_cursor:
            self._previous_cursor = copy.copy(new_cursor)
            self._last_transition = self._clock()
            if new_cursor.blinkwait is not None and new_cursor.blinkwait != 0:
                self._state = BlinkState.WAITING
            else:
                self._state = BlinkState.ON

        if 0 in (new_cursor.blinkwait, new_cursor.blinkoff, new_cursor.blinkon):
            return True

        delay = self._delay_for_state(new_cursor)
        if delay is not None and delay > 0:
            if self._last_transition + delay / 1000.0 < self._clock():
                self._state = (
                    BlinkState.OFF if self._state is BlinkState.ON else BlinkState.ON
                )
                self._last_transition = self._clock()

        scheduled_delay = self._delay_for_state(new_cursor)
        if scheduled_delay is not None and self._schedule is not None:
            self._schedule(self._last_transition + scheduled_delay / 1000.0)

        return self._state is not BlinkState.OFF