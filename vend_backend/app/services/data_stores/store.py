# vend_backend/app/services/data_stores/store.py
from __future__ import annotations

import logging
from datetime import datetime
from threading import RLock
from typing import Any, Dict, List, Optional

from vend_backend.app.config import BREWING_DELAY_S, COMPLETION_DELAY_S, LOW_STOCK_THRESHOLD
from vend_backend.app.models.fleet import AnalyticsEntry, Brew, Machine, User, UserSettings
from vend_backend.app.schemas import BrewStatus
from vend_backend.app.services.lifecycle import BrewLifecycleSimulator, Scheduler
from vend_backend.app.services.router_helpers import dash_helpers
from .analytics import DEFAULT_WINDOW_DAYS, AnalyticsRepository
from .base import IdFactory, Payload, new_id
from .brews import BrewRepository
from .machines import MachineRepository
from .users import UserRepository, UserSettingsRepository

log = logging.getLogger("vend.store")


class FleetStore:
    """
    Process-lifetime store for the whole fleet: machines, brews, analytics,
    users and their settings.

    Built once by the app factory and handed to request handlers; there is no
    module-level instance. Every public method runs under one coarse RLock,
    because FastAPI runs sync handlers on a threadpool and brew timers fire on
    their own threads. "Not found" is always a None/False return, never an
    exception.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        id_factory: IdFactory = new_id,
        brewing_delay_s: float = BREWING_DELAY_S,
        completion_delay_s: float = COMPLETION_DELAY_S,
        low_stock_threshold: int = LOW_STOCK_THRESHOLD,
    ) -> None:
        self._lock = RLock()
        self.scheduler = scheduler
        self.low_stock_threshold = low_stock_threshold

        clock = scheduler.now
        self.machines = MachineRepository(clock, id_factory)
        self.brews = BrewRepository(clock, id_factory)
        self.analytics = AnalyticsRepository(clock, id_factory)
        self.users = UserRepository(clock, id_factory)
        self.user_settings = UserSettingsRepository(clock, id_factory)

        self.lifecycle = BrewLifecycleSimulator(
            self.update_brew_status,
            scheduler,
            brewing_delay_s=brewing_delay_s,
            completion_delay_s=completion_delay_s,
        )

    # ---------------- Users ----------------
    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return self.users.get_by_username(username)

    def create_user(self, payload: Payload) -> User:
        with self._lock:
            user = self.users.create(payload)
        log.info("created user %s (%s)", user.username, user.role.value)
        return user

    # ---------------- Machines ----------------
    def list_machines(self) -> List[Machine]:
        with self._lock:
            return self.machines.list()

    def get_machine(self, machine_id: str) -> Optional[Machine]:
        with self._lock:
            return self.machines.get(machine_id)

    def create_machine(self, payload: Payload, *, last_seen: Optional[datetime] = None) -> Machine:
        with self._lock:
            machine = self.machines.create(payload, last_seen=last_seen)
        log.info("created machine %s (%s)", machine.id, machine.name)
        return machine

    def update_machine(self, machine_id: str, partial: Payload) -> Optional[Machine]:
        with self._lock:
            return self.machines.update(machine_id, partial)

    def delete_machine(self, machine_id: str) -> bool:
        with self._lock:
            removed = self.machines.delete(machine_id)
        if removed:
            log.info("deleted machine %s", machine_id)
        return removed

    # ---------------- Brews ----------------
    def list_brews(self) -> List[Brew]:
        with self._lock:
            return self.brews.list()

    def list_brews_by_machine(self, machine_id: str) -> List[Brew]:
        with self._lock:
            return self.brews.list_by_machine(machine_id)

    def get_brew(self, brew_id: str) -> Optional[Brew]:
        with self._lock:
            return self.brews.get(brew_id)

    def create_brew(self, payload: Payload) -> Brew:
        """Store a PENDING brew and start its simulated lifecycle."""
        with self._lock:
            brew = self.brews.create(payload)
        self.lifecycle.start(brew.id)
        log.info("brew %s queued on machine %s (%s)", brew.id, brew.machine_id, brew.coffee_type.value)
        return brew

    def update_brew_status(self, brew_id: str, status: BrewStatus) -> Optional[Brew]:
        with self._lock:
            return self.brews.update_status(brew_id, status)

    # ---------------- Analytics ----------------
    def list_analytics(self, machine_id: Optional[str] = None, days: int = DEFAULT_WINDOW_DAYS) -> List[AnalyticsEntry]:
        with self._lock:
            return self.analytics.list_analytics(machine_id, days)

    def create_analytics_entry(self, payload: Payload) -> AnalyticsEntry:
        with self._lock:
            return self.analytics.create(payload)

    # ---------------- User settings ----------------
    def get_user_settings(self, user_id: str) -> Optional[UserSettings]:
        with self._lock:
            return self.user_settings.get_for_user(user_id)

    def upsert_user_settings(self, payload: Payload) -> UserSettings:
        # lookup and write happen under one lock hold
        with self._lock:
            return self.user_settings.upsert(payload)

    # ---------------- Aggregations ----------------
    def dashboard_stats(self) -> Dict[str, Any]:
        return dash_helpers.dashboard_stats(self.list_machines(), self.low_stock_threshold)

    def admin_stats(self) -> Dict[str, Any]:
        return dash_helpers.admin_stats(self.list_machines(), self.low_stock_threshold)

    def analytics_summary(self, machine_id: Optional[str] = None, days: int = DEFAULT_WINDOW_DAYS) -> Dict[str, Any]:
        return dash_helpers.analytics_summary(self.list_analytics(machine_id, days))

    # ---------------- Lifecycle ----------------
    def reset(self) -> None:
        """Drop every record. Brew timers still in flight become no-ops."""
        with self._lock:
            for repo in (self.machines, self.brews, self.analytics, self.users, self.user_settings):
                repo.clear()
