# vend_backend/app/services/data_stores/__init__.py
"""
Unified export surface for the fleet store.

Import from here in routers/app code, e.g.:
    from vend_backend.app.services.data_stores import FleetStore, seed_sample_fleet
"""

from __future__ import annotations

# ---- Generic repository ----
from .base import Repository, coerce, new_id  # noqa: F401

# ---- Per-entity repositories ----
from .machines import MachineRepository  # noqa: F401
from .brews import BrewRepository  # noqa: F401
from .analytics import DEFAULT_WINDOW_DAYS, AnalyticsRepository  # noqa: F401
from .users import UserRepository, UserSettingsRepository  # noqa: F401

# ---- Aggregate store + demo data ----
from .store import FleetStore  # noqa: F401
from .seed import load_seed, seed_sample_fleet  # noqa: F401

__all__ = [
    # base
    "Repository", "coerce", "new_id",
    # repositories
    "MachineRepository", "BrewRepository", "AnalyticsRepository", "DEFAULT_WINDOW_DAYS",
    "UserRepository", "UserSettingsRepository",
    # store
    "FleetStore", "load_seed", "seed_sample_fleet",
]
