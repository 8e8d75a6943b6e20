"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Column, DateTime, Integer, JSON, String, Text

from gigchat.infrastructure.database import Base
from gigchat.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), nullable=False, index=True)
    type = Column(String(50), nullable=False, index=True)
    title = Column(String(120), nullable=False)
    message = Column(Text, nullable=False)
    event_id = Column(String(36), nullable=True, index=True)
    sender_id = Column(String(36), nullable=True)
    data = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    read_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationModel"]
