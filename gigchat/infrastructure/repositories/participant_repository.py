"""Persistence helpers for group chat participants."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gigchat.domain.entities import Participant, ParticipantProfileRow
from gigchat.infrastructure.models import ParticipantModel, ProfileModel
from gigchat.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

logger = logging.getLogger(__name__)


class ParticipantRepository:
    """Provide roster queries and upserts for :class:`Participant` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_event(self, event_id: str) -> Sequence[Participant]:
        query = (
            self.session.query(ParticipantModel)
            .filter(ParticipantModel.event_id == event_id)
            .order_by(ParticipantModel.joined_at.asc(), ParticipantModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_with_profiles(self, event_id: str) -> Sequence[ParticipantProfileRow]:
        """Return participants joined with their inline profile columns."""

        query = (
            self.session.query(
                ParticipantModel.user_id,
                ProfileModel.full_name,
                ProfileModel.email,
                ProfileModel.profile_image_url,
            )
            .outerjoin(ProfileModel, ProfileModel.id == ParticipantModel.user_id)
            .filter(ParticipantModel.event_id == event_id)
            .order_by(ParticipantModel.joined_at.asc(), ParticipantModel.id.asc())
        )
        return [
            ParticipantProfileRow(
                user_id=user_id,
                full_name=full_name,
                email=email,
                avatar_url=avatar_url,
            )
            for user_id, full_name, email, avatar_url in query.all()
        ]

    def get(self, event_id: str, user_id: str) -> Participant | None:
        model = self._get_model(event_id, user_id)
        return self._to_entity(model) if model else None

    def upsert(
        self,
        event_id: str,
        user_id: str,
        *,
        joined_at: datetime | None = None,
        last_read_at: datetime | None = None,
    ) -> Participant:
        """Insert the participant or update the existing ``(event_id, user_id)`` row.

        Only the timestamps that are provided are written on update.
        """

        model = ParticipantModel(
            event_id=event_id,
            user_id=user_id,
            joined_at=ensure_app_naive_datetime(joined_at or now_in_app_timezone()),
            last_read_at=ensure_app_naive_datetime(last_read_at),
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.debug("Participant %s already in event %s; updating", user_id, event_id)
            model = self._get_model(event_id, user_id)
            if model is None:
                raise
            if joined_at is not None:
                model.joined_at = ensure_app_naive_datetime(joined_at)
            if last_read_at is not None:
                model.last_read_at = ensure_app_naive_datetime(last_read_at)
            self.session.add(model)
            self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def touch_last_read(self, event_id: str, user_id: str, read_at: datetime) -> bool:
        updated = (
            self.session.query(ParticipantModel)
            .filter(
                ParticipantModel.event_id == event_id,
                ParticipantModel.user_id == user_id,
            )
            .update(
                {ParticipantModel.last_read_at: ensure_app_naive_datetime(read_at)},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return bool(updated)

    def _get_model(self, event_id: str, user_id: str) -> ParticipantModel | None:
        return (
            self.session.query(ParticipantModel)
            .filter(
                ParticipantModel.event_id == event_id,
                ParticipantModel.user_id == user_id,
            )
            .one_or_none()
        )

    @staticmethod
    def _to_entity(model: ParticipantModel) -> Participant:
        return Participant(
            id=model.id,
            event_id=model.event_id,
            user_id=model.user_id,
            joined_at=ensure_app_timezone(model.joined_at),
            last_read_at=ensure_app_timezone(model.last_read_at),
        )


__all__ = ["ParticipantRepository"]
