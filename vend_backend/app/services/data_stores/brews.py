# vend_backend/app/services/data_stores/brews.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from vend_backend.app.models.fleet import Brew
from vend_backend.app.schemas import BrewCreate, BrewStatus
from .base import Payload, Repository, coerce


class BrewRepository(Repository[Brew]):
    """Brews are only ever created and status-stepped; there is no delete."""

    record_type = Brew

    def _stamp(self, fields: Dict[str, Any], now: datetime) -> Dict[str, Any]:
        fields["status"] = BrewStatus.PENDING
        fields["created_at"] = now
        return fields

    def create(self, payload: Payload) -> Brew:
        return self.insert(coerce(BrewCreate, payload).model_dump())

    def list_by_machine(self, machine_id: str) -> List[Brew]:
        # full scan; an index keyed by machine_id is the next step for large fleets
        return self.list_filtered(lambda b: b.machine_id == machine_id)

    def update_status(self, brew_id: str, status: BrewStatus) -> Optional[Brew]:
        return self.patch(brew_id, {"status": status})
