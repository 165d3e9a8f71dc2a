"""Deferred callbacks for debounced checks and periodic refreshes."""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
import time
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class ScheduledCall:
    """Handle returned by a scheduler; ``cancel`` prevents a pending run."""

    def __init__(self, callback: Callback, due: float) -> None:
        self.callback = callback
        self.due = due
        self.cancelled = False
        self.done = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.done)

    def run(self) -> None:
        if not self.pending:
            return
        self.done = True
        try:
            self.callback()
        except Exception:
            logger.exception("Scheduled callback %r failed", self.callback)


class Scheduler:
    """Base interface: run ``callback`` once, ``delay`` seconds from now."""

    def call_later(self, delay: float, callback: Callback) -> ScheduledCall:
        raise NotImplementedError


class _TimerCall(ScheduledCall):
    def __init__(self, callback: Callback, delay: float) -> None:
        super().__init__(callback, time.monotonic() + delay)
        self.timer = threading.Timer(max(0.0, delay), self.run)
        self.timer.daemon = True

    def cancel(self) -> None:
        super().cancel()
        self.timer.cancel()


class ThreadingScheduler(Scheduler):
    """Run callbacks on ``threading.Timer`` threads."""

    def call_later(self, delay: float, callback: Callback) -> ScheduledCall:
        call = _TimerCall(callback, delay)
        call.timer.start()
        return call


class FrameScheduler(Scheduler):
    """Queue callbacks until a host loop calls :meth:`run_due`.

    Suits hosts that already tick on a single thread: callbacks then run on
    that thread, after whatever event handling happened in the same frame.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.monotonic
        self._queue: List[Tuple[float, int, ScheduledCall]] = []
        self._counter = itertools.count()
        self._lock = threading.Lock()

    def call_later(self, delay: float, callback: Callback) -> ScheduledCall:
        call = ScheduledCall(callback, self._clock() + max(0.0, delay))
        with self._lock:
            heapq.heappush(self._queue, (call.due, next(self._counter), call))
        return call

    def run_due(self) -> int:
        """Run every pending call whose time has come; return how many ran."""
        now = self._clock()
        ready: List[ScheduledCall] = []
        with self._lock:
            while self._queue and self._queue[0][0] <= now:
                _, _, call = heapq.heappop(self._queue)
                if call.pending:
                    ready.append(call)
        for call in ready:
            call.run()
        return len(ready)

    def pending_count(self) -> int:
        with self._lock:
            return sum(1 for _, _, call in self._queue if call.pending)


__all__ = ["FrameScheduler", "ScheduledCall", "Scheduler", "ThreadingScheduler"]
