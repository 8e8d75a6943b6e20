"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from gigchat.config import Settings, get_settings
from gigchat.domain.entities import ProfileRecord
from gigchat.domain.ports import (
    EventStore,
    NotificationSink,
    ParticipantDirectory,
    ProfileDirectory,
)
from gigchat.infrastructure.directories import (
    SqlEventStore,
    SqlNotificationSink,
    SqlParticipantDirectory,
    SqlProfileDirectory,
)
from gigchat.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=True)


def get_app_settings() -> Settings:
    return get_settings()


def get_event_store() -> EventStore:
    return SqlEventStore()


def get_participant_directory() -> ParticipantDirectory:
    return SqlParticipantDirectory()


def get_profile_directory() -> ProfileDirectory:
    return SqlProfileDirectory()


def get_notification_sink() -> NotificationSink:
    return SqlNotificationSink()


def _credentials_error(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def resolve_current_user(token: str, profiles: ProfileDirectory) -> ProfileRecord:
    """Resolve the authenticated user's profile for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_error() from exc

    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise _credentials_error()

    profile = await profiles.get_profile(user_id)
    if profile is None:
        raise _credentials_error("User not found")
    return profile


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    profiles: ProfileDirectory = Depends(get_profile_directory),
) -> ProfileRecord:
    """Return the authenticated user's profile from the bearer token."""

    return await resolve_current_user(token, profiles)
