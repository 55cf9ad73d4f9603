"""Timer-driven broadcast of tick events."""
import math
import time
from typing import Callable, Optional

from pattern_gallery.domain.events import Event, Notifier
from pattern_gallery.infrastructure.logging.logger import get_logger

DONE_MESSAGE = "Done With Observing. I am out."

# Slack for float error when a tick lands on the deadline
_TICK_EPSILON = 1e-9


class BroadcastLoop:
    """
    Broadcasts one ``Event`` per tick until a deadline passes.

    The loop waits on whichever of its two wake-ups comes first: the next
    tick or the deadline. Ticks are scheduled at ``start + k * interval``; a
    tick at or after the deadline is not delivered. Once the clock reaches
    the deadline the loop stops, even if a tick is overdue. Ticks missed
    while a slow delivery was running are dropped, and the next tick is the
    first scheduled one after the delivery returns. There is no early
    cancellation, the deadline is the only way out.

    ``clock`` and ``sleep`` default to the monotonic clock and ``time.sleep``;
    ``timestamp`` produces the event payload and defaults to
    ``time.time_ns``.
    """

    def __init__(
        self,
        notifier: Notifier,
        interval: float = 1.0,
        duration: float = 10.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        timestamp: Callable[[], int] = time.time_ns,
        on_done: Optional[Callable[[], None]] = None,
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        if duration <= 0:
            raise ValueError("duration must be positive")
        self._notifier = notifier
        self._interval = interval
        self._duration = duration
        # Index of the last tick scheduled strictly before the deadline
        self._last_tick = max(0, math.ceil(duration / interval - _TICK_EPSILON) - 1)
        self._clock = clock
        self._sleep = sleep
        self._timestamp = timestamp
        self._on_done = on_done or (lambda: print(DONE_MESSAGE))
        self._logger = get_logger(__name__)

    @property
    def max_ticks(self) -> int:
        """Ticks delivered when every delivery returns in time."""
        return self._last_tick

    def run(self) -> int:
        """Run until the deadline. Returns the number of ticks delivered."""
        start = self._clock()
        deadline = start + self._duration
        next_index = 1
        ticks = 0

        while True:
            tick_due = next_index <= self._last_tick
            wake_at = start + next_index * self._interval if tick_due else deadline
            remaining = wake_at - self._clock()
            if remaining > 0:
                self._sleep(remaining)

            if not tick_due or self._clock() >= deadline:
                self._logger.debug("Broadcast loop finished", ticks=ticks)
                self._on_done()
                return ticks

            event = Event(data=self._timestamp())
            self._notifier.notify(event)
            ticks += 1
            self._logger.debug("Tick delivered", tick=ticks, data=event.data)

            # Drop ticks that came due while the delivery was running
            elapsed = self._clock() - start
            next_index = max(next_index + 1, math.floor(elapsed / self._interval + _TICK_EPSILON) + 1)
