# app/routers/analytics.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from vend_backend.app.deps import get_store
from vend_backend.app.models.fleet import AnalyticsEntry
from vend_backend.app.schemas import AnalyticsCreate
from vend_backend.app.services.data_stores import DEFAULT_WINDOW_DAYS, FleetStore

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("", response_model=List[AnalyticsEntry])
def list_analytics(
    machine_id: Optional[str] = Query(default=None, alias="machineId"),
    days: int = Query(default=DEFAULT_WINDOW_DAYS, ge=0),
    store: FleetStore = Depends(get_store),
):
    return store.list_analytics(machine_id, days)


# What it does: per-type and per-day totals over the same window as the list.
@router.get("/summary")
def analytics_summary(
    machine_id: Optional[str] = Query(default=None, alias="machineId"),
    days: int = Query(default=DEFAULT_WINDOW_DAYS, ge=0),
    store: FleetStore = Depends(get_store),
) -> Dict[str, Any]:
    return store.analytics_summary(machine_id, days)


@router.post("", response_model=AnalyticsEntry, status_code=status.HTTP_201_CREATED)
def create_analytics_entry(payload: AnalyticsCreate, store: FleetStore = Depends(get_store)):
    return store.create_analytics_entry(payload)
