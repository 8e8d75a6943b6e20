"""Persistence helpers for user profiles."""

from __future__ import annotations

from sqlalchemy.orm import Session

from gigchat.domain.entities import ProfileRecord
from gigchat.infrastructure.models import ProfileModel


class ProfileRepository:
    """Provide lookups over :class:`ProfileRecord` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> ProfileRecord | None:
        model = self.session.get(ProfileModel, user_id)
        return self._to_entity(model) if model else None

    def create(self, profile: ProfileRecord) -> ProfileRecord:
        model = ProfileModel(
            id=profile.id,
            full_name=profile.full_name,
            username=profile.username,
            email=profile.email,
            profile_image_url=profile.avatar_url,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ProfileModel) -> ProfileRecord:
        return ProfileRecord(
            id=model.id,
            full_name=model.full_name,
            username=model.username,
            email=model.email,
            avatar_url=model.profile_image_url,
        )


__all__ = ["ProfileRepository"]
