# vend_backend/app/services/data_stores/base.py
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from vend_backend.app.models.fleet import FleetRecord

RecordT = TypeVar("RecordT", bound=FleetRecord)
SchemaT = TypeVar("SchemaT", bound=BaseModel)

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]
Payload = Union[BaseModel, Dict[str, Any]]


def new_id() -> str:
    # 128-bit random; collisions are not a practical concern
    return str(uuid.uuid4())


def coerce(schema: Type[SchemaT], payload: Payload) -> SchemaT:
    """Run raw dicts through the payload schema; pass validated models through."""
    if isinstance(payload, schema):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(exclude_unset=True)
    return schema.model_validate(payload)


class Repository(Generic[RecordT]):
    """
    Keyed in-memory collection for one record type.

    Not thread-safe by itself; FleetStore serializes access with one lock.
    Filters are linear scans over the whole collection, which is fine at fleet
    scale. A secondary index belongs here if that stops being true.
    """

    record_type: Type[RecordT]

    def __init__(self, clock: Clock, id_factory: IdFactory = new_id) -> None:
        self._clock = clock
        self._new_id = id_factory
        self._rows: Dict[str, RecordT] = {}

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._rows

    # ---- hooks ----
    def _stamp(self, fields: Dict[str, Any], now: datetime) -> Dict[str, Any]:
        """Fill generated timestamp fields on create."""
        return fields

    def _touch(self, fields: Dict[str, Any], now: datetime) -> Dict[str, Any]:
        """Adjust merged fields on update."""
        return fields

    # ---- CRUD ----
    def insert(self, fields: Dict[str, Any]) -> RecordT:
        fields = dict(fields)
        fields["id"] = self._new_id()
        record = self.record_type.model_validate(self._stamp(fields, self._clock()))
        self._rows[record.id] = record
        return record

    def get(self, record_id: str) -> Optional[RecordT]:
        return self._rows.get(record_id)

    def list(self) -> List[RecordT]:
        return list(self._rows.values())

    def list_filtered(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        return [r for r in self._rows.values() if predicate(r)]

    def patch(self, record_id: str, changes: Dict[str, Any]) -> Optional[RecordT]:
        current = self._rows.get(record_id)
        if current is None:
            return None
        merged = current.model_dump()
        merged.update({k: v for k, v in changes.items() if k != "id"})
        record = self.record_type.model_validate(self._touch(merged, self._clock()))
        self._rows[record_id] = record
        return record

    def delete(self, record_id: str) -> bool:
        return self._rows.pop(record_id, None) is not None

    def clear(self) -> None:
        self._rows.clear()
