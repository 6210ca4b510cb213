# vend_backend/app/services/lifecycle/brew_simulator.py
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from vend_backend.app.models.fleet import Brew
from vend_backend.app.schemas import BrewStatus
from .scheduler import Scheduler

log = logging.getLogger("vend.lifecycle")

# pending -> brewing -> completed. Nothing leads to FAILED.
NEXT_STATUS: Dict[BrewStatus, BrewStatus] = {
    BrewStatus.PENDING: BrewStatus.BREWING,
    BrewStatus.BREWING: BrewStatus.COMPLETED,
}

SetStatus = Callable[[str, BrewStatus], Optional[Brew]]


class BrewLifecycleSimulator:
    """
    Time-driven brew progress with no hardware feedback.

    start() schedules the BREWING transition after `brewing_delay_s`; that
    transition schedules COMPLETED after a further `completion_delay_s`.
    Transitions are unconditional and cannot be redirected. If the brew has
    disappeared by the time a transition fires, the chain stops quietly.
    Machine supplies and counters are left alone.
    """

    def __init__(
        self,
        set_status: SetStatus,
        scheduler: Scheduler,
        *,
        brewing_delay_s: float = 1.0,
        completion_delay_s: float = 30.0,
    ) -> None:
        self._set_status = set_status
        self._scheduler = scheduler
        self._delays: Dict[BrewStatus, float] = {
            BrewStatus.BREWING: brewing_delay_s,
            BrewStatus.COMPLETED: completion_delay_s,
        }

    @property
    def brewing_delay_s(self) -> float:
        return self._delays[BrewStatus.BREWING]

    @property
    def completion_delay_s(self) -> float:
        return self._delays[BrewStatus.COMPLETED]

    def start(self, brew_id: str) -> None:
        self._schedule(brew_id, NEXT_STATUS[BrewStatus.PENDING])

    def _schedule(self, brew_id: str, status: BrewStatus) -> None:
        self._scheduler.call_later(self._delays[status], lambda: self._transition(brew_id, status))

    def _transition(self, brew_id: str, status: BrewStatus) -> None:
        brew = self._set_status(brew_id, status)
        if brew is None:
            log.debug("brew %s vanished before %s; skipping", brew_id, status.value)
            return
        log.debug("brew %s -> %s", brew_id, status.value)
        following = NEXT_STATUS.get(status)
        if following is not None:
            self._schedule(brew_id, following)
