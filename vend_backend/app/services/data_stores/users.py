# vend_backend/app/services/data_stores/users.py
from __future__ import annotations

from typing import Optional

from vend_backend.app.models.fleet import User, UserSettings
from vend_backend.app.schemas import UserCreate, UserSettingsUpsert
from .base import Payload, Repository, coerce


class UserRepository(Repository[User]):
    record_type = User

    def create(self, payload: Payload) -> User:
        # username uniqueness is a convention here, not enforced
        return self.insert(coerce(UserCreate, payload).model_dump())

    def get_by_username(self, username: str) -> Optional[User]:
        for user in self._rows.values():
            if user.username == username:
                return user
        return None


class UserSettingsRepository(Repository[UserSettings]):
    """One settings record per user_id, kept that way by upsert() rather than a constraint."""

    record_type = UserSettings

    def get_for_user(self, user_id: str) -> Optional[UserSettings]:
        for settings in self._rows.values():
            if settings.user_id == user_id:
                return settings
        return None

    def upsert(self, payload: Payload) -> UserSettings:
        data = coerce(UserSettingsUpsert, payload)
        existing = self.get_for_user(data.user_id)
        if existing is None:
            return self.insert(data.model_dump())
        # only what the caller actually sent overwrites the stored record
        return self.patch(existing.id, data.model_dump(exclude_unset=True))
