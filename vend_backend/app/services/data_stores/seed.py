# vend_backend/app/services/data_stores/seed.py
from __future__ import annotations

import logging
import random
from datetime import timedelta
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from vend_backend.app.config.paths import resolve_fleet_file
from vend_backend.app.schemas import CoffeeType
from .store import FleetStore

log = logging.getLogger("vend.seed")

SEED_FILE = "seed_fleet.yaml"


def load_seed(path: Optional[Path] = None) -> Dict[str, Any]:
    p = path or resolve_fleet_file(SEED_FILE)
    with p.open("r", encoding="utf-8") as f:
        blob = yaml.safe_load(f) or {}
    if not isinstance(blob, dict):
        raise ValueError(f"seed file must hold a mapping: {p}")
    return blob


def seed_sample_fleet(
    store: FleetStore,
    *,
    seed: Optional[Dict[str, Any]] = None,
    rng: Optional[random.Random] = None,
) -> Dict[str, int]:
    """
    Fill an empty store with the demo fleet: users, machines, and `days` days of
    per-machine, per-coffee-type analytics ending now.
    """
    blob = seed if seed is not None else load_seed()
    rng = rng or random.Random()
    now = store.scheduler.now()

    for u in blob.get("users") or []:
        store.create_user(u)

    machine_ids = []
    for raw in blob.get("machines") or []:
        m = dict(raw)
        hours_ago = m.pop("lastSeenHoursAgo", None)
        last_seen = now - timedelta(hours=float(hours_ago)) if hours_ago else None
        machine = store.create_machine(m, last_seen=last_seen)
        machine_ids.append(machine.id)

    spec = blob.get("analytics") or {}
    prices = {CoffeeType(k): Decimal(str(v)) for k, v in (spec.get("prices") or {}).items()}
    days = int(spec.get("days", 30))
    lo, hi = int(spec.get("cups_min", 5)), int(spec.get("cups_max", 24))

    entries = 0
    for i in range(days):
        date = now - timedelta(days=i)
        for machine_id in machine_ids:
            for coffee_type, price in prices.items():
                cups = rng.randint(lo, hi)
                store.create_analytics_entry({
                    "machine_id": machine_id,
                    "date": date,
                    "coffee_type": coffee_type,
                    "revenue": cups * price,
                    "cups": cups,
                })
                entries += 1

    counts = {"users": len(blob.get("users") or []), "machines": len(machine_ids), "analytics": entries}
    log.info("seeded sample fleet: %s", counts)
    return counts
