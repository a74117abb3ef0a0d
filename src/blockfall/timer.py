"""Fixed-interval gravity driver.

The timer does not own a clock.  Callers feed elapsed milliseconds through
:meth:`GravityTimer.advance` and receive the number of gravity ticks that
fell due, the same accumulate-and-compare scheme a frame loop uses.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from .utils import GRAVITY_MS


class GravityTimer:
    """Accumulates elapsed time and reports due gravity ticks."""

    def __init__(self, interval_ms: float = GRAVITY_MS) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.interval_ms = float(interval_ms)
        self._running = False
        self._accum = 0.0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def elapsed_ms(self) -> float:
        """Time accumulated towards the next tick."""

        return self._accum

    def start(self) -> None:
        self._running = True

    def stop(self) -> None:
        """Disable the timer and forget any partially accumulated interval."""

        self._running = False
        self._accum = 0.0

    def advance(self, dt_ms: float) -> int:
        """Add ``dt_ms`` of elapsed time and return the ticks now due."""

        if not self._running or dt_ms <= 0:
            return 0
        self._accum += dt_ms
        ticks = int(self._accum // self.interval_ms)
        self._accum -= ticks * self.interval_ms
        return ticks

    @contextmanager
    def suspended(self) -> Iterator[None]:
        """Stop the timer for the body of the ``with`` block.

        The previous running state is restored on exit, so nested suspensions
        only resume the timer once the outermost block finishes.
        """

        was_running = self._running
        if was_running:
            self.stop()
        try:
            yield
        finally:
            if was_running:
                self.start()
