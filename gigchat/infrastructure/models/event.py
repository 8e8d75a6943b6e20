"""SQLAlchemy model for gig events."""

from sqlalchemy import Column, DateTime, String

from gigchat.infrastructure.database import Base
from gigchat.utils import now_in_app_naive_datetime


class EventModel(Base):
    """Database representation of an event posting."""

    __tablename__ = "posts"

    id = Column(String(36), primary_key=True)
    title = Column(String(200), nullable=True)
    promoter_id = Column(String(36), nullable=True, index=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["EventModel"]
