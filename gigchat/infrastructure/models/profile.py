"""SQLAlchemy model for the user profile table."""

from sqlalchemy import Column, String

from gigchat.infrastructure.database import Base


class ProfileModel(Base):
    """Database representation of a marketplace user profile."""

    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True)
    full_name = Column(String(120), nullable=True)
    username = Column(String(50), nullable=True, index=True)
    email = Column(String(120), nullable=True, index=True)
    profile_image_url = Column(String(500), nullable=True)


__all__ = ["ProfileModel"]
