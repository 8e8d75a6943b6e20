"""SQLAlchemy model for group chat participants."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint

from gigchat.infrastructure.database import Base
from gigchat.utils import now_in_app_naive_datetime


class ParticipantModel(Base):
    """One user's membership in one event group chat."""

    __tablename__ = "message_participants"
    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_message_participants_event_user"),
    )

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(
        String(36), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(String(36), nullable=False, index=True)
    joined_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    last_read_at = Column(DateTime(), nullable=True)


__all__ = ["ParticipantModel"]
