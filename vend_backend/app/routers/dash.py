# app/routers/dash.py
from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from vend_backend.app.deps import get_store
from vend_backend.app.models.fleet import Machine
from vend_backend.app.services.data_stores import FleetStore

router = APIRouter(tags=["dash"])


# What it does: facility dashboard tiles (fleet size, online, low stock, revenue today).
@router.get("/dashboard/stats")
def dashboard_stats(store: FleetStore = Depends(get_store)) -> Dict[str, Any]:
    return store.dashboard_stats()


# What it does: admin overview incl. the x30 "monthly" placeholders.
@router.get("/admin/stats")
def admin_stats(store: FleetStore = Depends(get_store)) -> Dict[str, Any]:
    return store.admin_stats()


@router.get("/admin/machines", response_model=List[Machine])
def admin_machines(store: FleetStore = Depends(get_store)):
    return store.list_machines()
