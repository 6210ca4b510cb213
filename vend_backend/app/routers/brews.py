# app/routers/brews.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from vend_backend.app.deps import get_store
from vend_backend.app.models.fleet import Brew
from vend_backend.app.schemas import BrewCreate
from vend_backend.app.services.data_stores import FleetStore

router = APIRouter(prefix="/brews", tags=["brews"])


@router.get("", response_model=List[Brew])
def list_brews(
    machine_id: Optional[str] = Query(default=None, alias="machineId"),
    store: FleetStore = Depends(get_store),
):
    if machine_id is not None:
        return store.list_brews_by_machine(machine_id)
    return store.list_brews()


@router.post("", response_model=Brew, status_code=status.HTTP_201_CREATED)
def create_brew(payload: BrewCreate, store: FleetStore = Depends(get_store)):
    """Queue a remote brew. It starts PENDING and advances on its own."""
    return store.create_brew(payload)


@router.get("/{brew_id}", response_model=Brew)
def get_brew(brew_id: str, store: FleetStore = Depends(get_store)):
    brew = store.get_brew(brew_id)
    if brew is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Brew not found")
    return brew
