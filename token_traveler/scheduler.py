"""Deferred callbacks.

The engine only ever schedules fire-and-forget one-shot callbacks (cooldown
expiry, camera-follow phases) and never awaits or cancels them.
:class:`ManualScheduler` runs them on a virtual clock for tests and offline
simulation; :class:`ThreadingScheduler` runs them on ``threading.Timer``.
"""

import heapq
import itertools
import logging
import threading
from typing import Callable, List, Protocol, Tuple

from token_traveler.types import Millis

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class Scheduler(Protocol):
    def call_later(self, delay_ms: Millis, callback: Callback) -> None: ...


class ManualScheduler:
    """Virtual-clock scheduler advanced explicitly by :meth:`advance`.

    Callbacks due at the same instant run in scheduling order. Callbacks that
    schedule further callbacks within the advanced window run in the same
    :meth:`advance` call.
    """

    def __init__(self) -> None:
        self.now: Millis = 0
        self._queue: List[Tuple[Millis, int, Callback]] = []
        self._counter = itertools.count()

    def call_later(self, delay_ms: Millis, callback: Callback) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must be non-negative")
        heapq.heappush(self._queue, (self.now + delay_ms, next(self._counter), callback))

    def advance(self, delay_ms: Millis) -> int:
        """Move the clock forward and run due callbacks. Returns how many ran."""
        if delay_ms < 0:
            raise ValueError("delay_ms must be non-negative")
        target = self.now + delay_ms
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, callback = heapq.heappop(self._queue)
            self.now = due
            callback()
            ran += 1
        self.now = target
        return ran

    @property
    def pending(self) -> int:
        return len(self._queue)


class ThreadingScheduler:
    """Runs callbacks on daemon ``threading.Timer`` threads."""

    def call_later(self, delay_ms: Millis, callback: Callback) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must be non-negative")
        timer = threading.Timer(delay_ms / 1000.0, self._run, args=(callback,))
        timer.daemon = True
        timer.start()

    @staticmethod
    def _run(callback: Callback) -> None:
        try:
            callback()
        except Exception:
            logger.exception("Scheduled callback failed")
