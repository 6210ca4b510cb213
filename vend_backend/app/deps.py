# vend_backend/app/deps.py
from __future__ import annotations

from fastapi import Request

from vend_backend.app.services.data_stores import FleetStore


def get_store(request: Request) -> FleetStore:
    """The store built by create_app(); routers take it via Depends(get_store)."""
    return request.app.state.store
