# vend_backend/app/services/lifecycle/__init__.py
from __future__ import annotations

from .scheduler import ManualScheduler, ScheduledTask, Scheduler, ThreadingScheduler, utcnow  # noqa: F401
from .brew_simulator import NEXT_STATUS, BrewLifecycleSimulator  # noqa: F401

__all__ = [
    "ManualScheduler", "ScheduledTask", "Scheduler", "ThreadingScheduler", "utcnow",
    "NEXT_STATUS", "BrewLifecycleSimulator",
]
