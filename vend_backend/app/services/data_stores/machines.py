# vend_backend/app/services/data_stores/machines.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from vend_backend.app.models.fleet import Machine
from vend_backend.app.schemas import MachineCreate, MachineUpdate
from .base import Payload, Repository, coerce


class MachineRepository(Repository[Machine]):
    record_type = Machine

    def _stamp(self, fields: Dict[str, Any], now: datetime) -> Dict[str, Any]:
        fields["created_at"] = now
        fields.setdefault("last_seen", now)
        return fields

    def _touch(self, fields: Dict[str, Any], now: datetime) -> Dict[str, Any]:
        # any update counts as a sign of life, whatever changed
        fields["last_seen"] = now
        return fields

    def create(self, payload: Payload, *, last_seen: Optional[datetime] = None) -> Machine:
        """`last_seen` is only for seeding historical fleets; callers normally omit it."""
        fields = coerce(MachineCreate, payload).model_dump()
        if last_seen is not None:
            fields["last_seen"] = last_seen
        return self.insert(fields)

    def update(self, machine_id: str, partial: Payload) -> Optional[Machine]:
        changes = coerce(MachineUpdate, partial).model_dump(exclude_unset=True)
        return self.patch(machine_id, changes)
