"""Endpoints and websocket handler for realtime notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect, status
from sqlalchemy.orm import Session

from gigchat.domain.entities import Notification, ProfileRecord
from gigchat.infrastructure.database import SessionLocal, get_db
from gigchat.infrastructure.directories import SqlProfileDirectory
from gigchat.infrastructure.notifications import notification_manager, serialize_notification
from gigchat.infrastructure.repositories import NotificationRepository
from gigchat.interfaces.api.dependencies import get_current_user, resolve_current_user
from gigchat.interfaces.api.schemas import NotificationMarkReadRequest, NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])

logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or 0,
        user_id=notification.recipient_id,
        type=notification.event_type,
        title=notification.title,
        message=notification.message,
        event_id=notification.event_id,
        sender_id=notification.sender_id,
        data=notification.payload or {},
        is_read=notification.is_read,
        created_at=notification.created_at,
        read_at=notification.read_at,
    )


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    db: Session = Depends(get_db),
    current_user: ProfileRecord = Depends(get_current_user),
) -> list[NotificationRead]:
    """Return the most recent notifications for the authenticated user."""

    notifications = NotificationRepository(db).list_for_user(current_user.id)
    return [_notification_to_schema(notification) for notification in notifications]


@router.post("/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_notifications_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    current_user: ProfileRecord = Depends(get_current_user),
) -> None:
    NotificationRepository(db).mark_as_read(payload.unique_ids(), user_id=current_user.id)


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket endpoint that streams notifications to the authenticated user."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=1008)
        return

    try:
        user = await resolve_current_user(token, SqlProfileDirectory())
    except HTTPException:
        await websocket.close(code=1008)
        return

    session = SessionLocal()
    try:
        pending_notifications = NotificationRepository(session).list_unread_for_user(user.id)
    finally:
        session.close()

    await notification_manager.connect(user.id, websocket)
    try:
        if pending_notifications:
            await websocket.send_json(
                {"type": "init", "data": [serialize_notification(n) for n in pending_notifications]}
            )
        while True:
            message = await websocket.receive_json()
            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "ack":
                ids = message.get("ids", [])
                if isinstance(ids, list) and ids:
                    ack_session = SessionLocal()
                    try:
                        NotificationRepository(ack_session).mark_as_read(ids, user_id=user.id)
                    finally:
                        ack_session.close()
    except WebSocketDisconnect:
        logger.debug("Notification websocket closed for user %s", user.id)
    finally:
        notification_manager.disconnect(user.id, websocket)
