# schemas.py  (create/update payloads for the fleet API)

from __future__ import annotations
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, conint, field_validator
from pydantic.alias_generators import to_camel


# ===================== Enums =====================

class MachineStatus(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"
    MAINTENANCE = "maintenance"

class BrewStatus(str, Enum):
    PENDING = "pending"
    BREWING = "brewing"
    COMPLETED = "completed"
    FAILED = "failed"            # part of the taxonomy, never produced by the simulator

class CoffeeType(str, Enum):
    ESPRESSO = "espresso"
    LATTE = "latte"
    CAPPUCCINO = "cappuccino"
    ICED_COFFEE = "iced-coffee"

class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"

class Theme(str, Enum):
    DARK_PROFESSIONAL = "dark-professional"
    LIGHT_MINIMAL = "light-minimal"
    MIDNIGHT_BLUE = "midnight-blue"
    FOREST_GREEN = "forest-green"
    WARM_COPPER = "warm-copper"
    DEEP_PURPLE = "deep-purple"
    ARCTIC_ICE = "arctic-ice"
    ROSE_GOLD = "rose-gold"


# ===================== Shared config =====================

class CamelModel(BaseModel):
    """
    camelCase on the wire (coffeeBeans, revenueToday, ...), snake_case in Python.
    Either spelling is accepted on input; unknown keys are dropped so clients
    can send back whole records (id, lastSeen, ...) without a 400.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes are taken to be UTC so window comparisons never mix naive/aware."""
    if value is None:
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# ===================== Machines =====================

class MachineCreate(CamelModel):
    name: str = Field(min_length=1)
    location: str = Field(min_length=1)
    status: MachineStatus = MachineStatus.ONLINE
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None
    # supply levels are percentages by convention only
    coffee_beans: int = 100
    milk: int = 100
    water: int = 100
    cups_today: int = 0
    revenue_today: Decimal = Decimal("0")

class MachineUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    status: Optional[MachineStatus] = None
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None
    coffee_beans: Optional[int] = None
    milk: Optional[int] = None
    water: Optional[int] = None
    cups_today: Optional[int] = None
    revenue_today: Optional[Decimal] = None

    # omitted means "leave as is"; an explicit null would blank a required column
    @field_validator(
        "name", "location", "status", "coffee_beans", "milk", "water",
        "cups_today", "revenue_today", mode="before",
    )
    @classmethod
    def _no_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


# ===================== Brews =====================

class BrewCreate(CamelModel):
    machine_id: str = Field(min_length=1)
    coffee_type: CoffeeType
    customer_name: Optional[str] = None


# ===================== Analytics =====================

class AnalyticsCreate(CamelModel):
    machine_id: str = Field(min_length=1)
    date: datetime
    coffee_type: CoffeeType
    revenue: Decimal
    cups: conint(ge=0) = 1

    @field_validator("date")
    @classmethod
    def _date_is_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


# ===================== Users & settings =====================

class UserCreate(CamelModel):
    username: str = Field(min_length=1)
    password: str          # stored as given; no hashing in this demo backend
    role: UserRole = UserRole.USER

class UserSettingsUpsert(CamelModel):
    user_id: str = Field(min_length=1)
    theme: Theme = Theme.DARK_PROFESSIONAL
    preferences: Optional[Dict[str, Any]] = None
