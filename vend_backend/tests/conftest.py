from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from vend_backend.app.main import create_app
from vend_backend.app.services.data_stores import FleetStore
from vend_backend.app.services.lifecycle import ManualScheduler

T0 = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


# --- Virtual clock: nothing fires until the test advances it ---
@pytest.fixture
def scheduler():
    return ManualScheduler(start=T0)

@pytest.fixture
def store(scheduler):
    return FleetStore(scheduler, brewing_delay_s=1.0, completion_delay_s=30.0, low_stock_threshold=30)

# --- HTTP surface over the same store (no demo seeding) ---
@pytest.fixture
def client(store):
    return TestClient(create_app(store, seed=False))

# --- Four-machine fixture: 2 online, 1 offline, 1 maintenance; 2 low on beans ---
@pytest.fixture
def fleet(store):
    rows = [
        {"name": "Downtown Office", "location": "123 Business Ave", "status": "online",
         "coffeeBeans": 85, "milk": 40, "water": 70, "cupsToday": 42, "revenueToday": "126.10"},
        {"name": "Tech Hub Lounge", "location": "456 Innovation St", "status": "online",
         "coffeeBeans": 12, "milk": 78, "water": 88, "cupsToday": 67, "revenueToday": "201.20"},
        {"name": "Campus Library", "location": "789 University Dr", "status": "offline",
         "coffeeBeans": 45, "milk": 35, "water": 60, "cupsToday": 0, "revenueToday": "0.00"},
        {"name": "Retail Plaza", "location": "321 Shopping Blvd", "status": "maintenance",
         "coffeeBeans": 29, "milk": 50, "water": 45, "cupsToday": 18, "revenueToday": "54.05"},
    ]
    return [store.create_machine(r) for r in rows]
