# vend_backend/app/services/lifecycle/scheduler.py
"""
Clock + delayed-callback primitive consumed by the fleet store.

Two implementations:
  - ThreadingScheduler: wall clock (UTC) and daemon threading.Timer callbacks.
  - ManualScheduler:    virtual clock; nothing runs until advance() is called.
"""
from __future__ import annotations

import heapq
import itertools
import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Protocol, Set, Tuple

log = logging.getLogger("vend.lifecycle")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(eq=False)
class ScheduledTask:
    due: datetime
    callback: Callable[[], None]
    cancelled: bool = False
    _timer: Optional[threading.Timer] = field(default=None, repr=False)

    def cancel(self) -> None:
        self.cancelled = True
        if self._timer is not None:
            self._timer.cancel()


class Scheduler(Protocol):
    def now(self) -> datetime: ...
    def call_later(self, delay_s: float, callback: Callable[[], None]) -> ScheduledTask: ...
    def cancel_all(self) -> None: ...


class ThreadingScheduler:
    """Real-time scheduler. Live timers are tracked so shutdown can drop them."""

    def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._live: Set[ScheduledTask] = set()

    def now(self) -> datetime:
        return self._clock()

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(due=self.now() + timedelta(seconds=delay_s), callback=callback)

        def _fire() -> None:
            with self._lock:
                self._live.discard(task)
            if task.cancelled:
                return
            try:
                callback()
            except Exception:
                # timer threads have no caller to propagate to
                log.exception("scheduled callback failed")

        timer = threading.Timer(delay_s, _fire)
        timer.daemon = True
        task._timer = timer
        with self._lock:
            self._live.add(task)
        timer.start()
        return task

    def pending(self) -> int:
        with self._lock:
            return len(self._live)

    def cancel_all(self) -> None:
        with self._lock:
            live, self._live = self._live, set()
        for task in live:
            task.cancel()
        if live:
            log.info("dropped %d pending timer(s)", len(live))


class ManualScheduler:
    """
    Virtual clock with a heap-ordered delayed-task queue.
    advance() moves time forward and runs due callbacks in due-time order,
    including callbacks scheduled by earlier callbacks inside the same window.
    """

    def __init__(self, start: Optional[datetime] = None) -> None:
        self._now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        self._queue: List[Tuple[datetime, int, ScheduledTask]] = []
        self._seq = itertools.count()

    def now(self) -> datetime:
        return self._now

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(due=self._now + timedelta(seconds=delay_s), callback=callback)
        heapq.heappush(self._queue, (task.due, next(self._seq), task))
        return task

    def advance(self, seconds: float) -> int:
        """Move the clock forward; returns how many callbacks ran."""
        if seconds < 0:
            raise ValueError("cannot move the clock backwards")
        target = self._now + timedelta(seconds=seconds)
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, task = heapq.heappop(self._queue)
            self._now = max(self._now, due)
            if task.cancelled:
                continue
            task.callback()
            ran += 1
        self._now = target
        return ran

    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if not t.cancelled)

    def cancel_all(self) -> None:
        for _, _, task in self._queue:
            task.cancel()
        self._queue.clear()
