# app/routers/user_settings.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from vend_backend.app.deps import get_store
from vend_backend.app.models.fleet import UserSettings
from vend_backend.app.schemas import UserSettingsUpsert
from vend_backend.app.services.data_stores import FleetStore

router = APIRouter(prefix="/user-settings", tags=["user-settings"])


@router.get("/{user_id}", response_model=UserSettings)
def get_user_settings(user_id: str, store: FleetStore = Depends(get_store)):
    settings = store.get_user_settings(user_id)
    if settings is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User settings not found")
    return settings


@router.post("", response_model=UserSettings)
def upsert_user_settings(payload: UserSettingsUpsert, store: FleetStore = Depends(get_store)):
    return store.upsert_user_settings(payload)
