# vend_backend/app/services/data_stores/analytics.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from vend_backend.app.models.fleet import AnalyticsEntry
from vend_backend.app.schemas import AnalyticsCreate
from .base import Payload, Repository, coerce

DEFAULT_WINDOW_DAYS = 30


class AnalyticsRepository(Repository[AnalyticsEntry]):
    """Append-only sales rollups."""

    record_type = AnalyticsEntry

    def create(self, payload: Payload) -> AnalyticsEntry:
        return self.insert(coerce(AnalyticsCreate, payload).model_dump())

    def list_analytics(self, machine_id: Optional[str] = None, days: int = DEFAULT_WINDOW_DAYS) -> List[AnalyticsEntry]:
        """
        Entries dated at or after now - `days`, optionally for one machine.

        The window is rolling (a timestamp cutoff), not aligned to calendar days:
        days=1 means "the last 24 hours", and days=0 keeps only entries dated now
        or later. A window too large for datetime arithmetic keeps every entry.
        """
        if days < 0:
            raise ValueError(f"days must be >= 0, got {days}")
        try:
            cutoff = self._clock() - timedelta(days=days)
        except OverflowError:
            # a window reaching past year 1 covers everything
            cutoff = datetime.min.replace(tzinfo=timezone.utc)

        def keep(entry: AnalyticsEntry) -> bool:
            if machine_id is not None and entry.machine_id != machine_id:
                return False
            return entry.date >= cutoff

        return self.list_filtered(keep)
