"""Persistence helpers for event entities."""

from __future__ import annotations

from sqlalchemy.orm import Session

from gigchat.domain.entities import Event
from gigchat.infrastructure.models import EventModel


class EventRepository:
    """Read access to the events that own group chats."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, event_id: str) -> Event | None:
        model = self.session.get(EventModel, event_id)
        return self._to_entity(model) if model else None

    def create(self, event: Event) -> Event:
        model = EventModel(id=event.id, title=event.title, promoter_id=event.promoter_id)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: EventModel) -> Event:
        return Event(id=model.id, title=model.title, promoter_id=model.promoter_id)


__all__ = ["EventRepository"]
