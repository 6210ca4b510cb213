# vend_backend/app/models/fleet.py
"""Stored records for the fleet store.

Records are frozen: the store never hands out something a caller can mutate in
place, and every update produces a new instance. Relationships between records
are plain ids (``machine_id``, ``user_id``), never live references.
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import ConfigDict, field_validator

from vend_backend.app.schemas import (
    BrewStatus,
    CamelModel,
    CoffeeType,
    MachineStatus,
    Theme,
    UserRole,
    as_utc,
)


class FleetRecord(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str


class Machine(FleetRecord):
    name: str
    location: str
    status: MachineStatus = MachineStatus.ONLINE
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None
    coffee_beans: int = 100
    milk: int = 100
    water: int = 100
    cups_today: int = 0
    revenue_today: Decimal = Decimal("0")
    last_seen: datetime
    created_at: datetime

    def is_low_stock(self, threshold: int) -> bool:
        return self.coffee_beans < threshold or self.milk < threshold or self.water < threshold


class Brew(FleetRecord):
    machine_id: str
    coffee_type: CoffeeType
    customer_name: Optional[str] = None
    status: BrewStatus = BrewStatus.PENDING
    created_at: datetime


class AnalyticsEntry(FleetRecord):
    machine_id: str
    date: datetime
    coffee_type: CoffeeType
    revenue: Decimal
    cups: int = 1

    @field_validator("date")
    @classmethod
    def _date_is_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class User(FleetRecord):
    username: str
    password: str
    role: UserRole = UserRole.USER


class UserSettings(FleetRecord):
    user_id: str
    theme: Theme = Theme.DARK_PROFESSIONAL
    preferences: Optional[Dict[str, Any]] = None
