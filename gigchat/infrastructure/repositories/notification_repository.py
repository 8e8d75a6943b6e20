"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy.orm import Session

from gigchat.domain.entities import Notification
from gigchat.infrastructure.models import NotificationModel
from gigchat.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: str,
        *,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        query = query.filter(NotificationModel.user_id == user_id)
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_unread_for_user(
        self, user_id: str, *, limit: int | None = 50
    ) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.read_at.is_(None))
            .order_by(
                NotificationModel.created_at.desc(), NotificationModel.id.desc()
            )
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_by_type(self, user_id: str, event_type: str) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.type == event_type)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, notification: Notification) -> Notification:
        return self.create_many([notification])[0]

    def create_many(self, notifications: Sequence[Notification]) -> list[Notification]:
        """Insert ``notifications`` in a single transaction."""

        models = []
        for notification in notifications:
            model = NotificationModel()
            self._apply_entity_to_model(model, notification)
            models.append(model)
        if not models:
            return []
        self.session.add_all(models)
        self.session.commit()
        for model in models:
            self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    def mark_as_read(self, notification_ids: Iterable[int], *, user_id: str) -> None:
        ids = [notification_id for notification_id in notification_ids if notification_id is not None]
        if not ids:
            return
        self.session.query(NotificationModel).filter(
            NotificationModel.id.in_(ids),
            NotificationModel.user_id == user_id,
        ).update(
            {
                NotificationModel.read_at: ensure_app_naive_datetime(
                    now_in_app_timezone()
                )
            },
            synchronize_session=False,
        )
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel,
        notification: Notification,
    ) -> None:
        model.created_at = (
            ensure_app_naive_datetime(notification.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )
        model.user_id = notification.recipient_id
        model.type = notification.event_type
        model.title = notification.title
        model.message = notification.message
        model.event_id = notification.event_id
        model.sender_id = notification.sender_id
        model.data = notification.payload or {}
        model.read_at = ensure_app_naive_datetime(notification.read_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.user_id,
            event_type=model.type,
            title=model.title,
            message=model.message,
            event_id=model.event_id,
            sender_id=model.sender_id,
            payload=model.data or {},
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["NotificationRepository"]
