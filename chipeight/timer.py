"""Delay and sound timers driven by a millisecond clock."""

from __future__ import annotations

import time
from typing import Callable, Optional

_TICK_WRAP = 1 << 32
_INTERVAL_MS = 16


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class Timers:
    """The delay and sound timers.

    ``clock`` returns milliseconds as an integer. Tick readings are kept as
    unsigned 32-bit values, like a millisecond tick counter.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock if clock is not None else _monotonic_ms
        self.delay = 0
        self.sound = 0
        self.previous = self._clock() % _TICK_WRAP
        self.current = self.previous

    def tick(self) -> bool:
        """Read the clock and count both timers down if the interval test fires.

        The interval is measured as previous minus current in unsigned
        32-bit arithmetic, so any forward movement of the clock fires it,
        as does a step backwards of more than 16 ms. Returns whether the
        timers were counted down.
        """
        self.current = self._clock() % _TICK_WRAP
        elapsed = (self.previous - self.current) % _TICK_WRAP
        fired = elapsed > _INTERVAL_MS
        if fired:
            if self.delay > 0:
                self.delay -= 1
            if self.sound > 0:
                self.sound -= 1
        self.previous = self.current
        return fired