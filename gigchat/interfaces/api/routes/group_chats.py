"""Endpoints for event group chat membership and mentions."""

from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from gigchat.application.use_cases.group_chats import (
    add_talent_to_group_chat,
    ensure_group_chat_for_event,
    is_participant,
    join_group_chat,
    mark_group_chat_read,
    recover_group_chat_participation,
    verify_group_chat,
)
from gigchat.application.use_cases.mentions import (
    notify_mentions,
    parse_mentions,
    resolve_roster,
)
from gigchat.application.use_cases.mentions.identity import identity_from_profile
from gigchat.config import Settings
from gigchat.domain.entities import Event, ProfileRecord
from gigchat.domain.ports import (
    EventStore,
    NotificationSink,
    ParticipantDirectory,
    ProfileDirectory,
)
from gigchat.infrastructure.notifications import dispatch_notifications
from gigchat.interfaces.api.dependencies import (
    get_app_settings,
    get_current_user,
    get_event_store,
    get_notification_sink,
    get_participant_directory,
    get_profile_directory,
)
from gigchat.interfaces.api.schemas import (
    GroupChatMemberRead,
    GroupChatMessageCreate,
    GroupChatVerificationRead,
    MembershipResult,
    MentionsAccepted,
    ParticipantRead,
    RecoveredParticipationRead,
)

router = APIRouter(prefix="/events", tags=["group-chats"])
participants_router = APIRouter(prefix="/participants", tags=["group-chats"])


async def _get_event_or_404(events: EventStore, event_id: str) -> Event:
    event = await events.get_event(event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.get("/{event_id}/participants", response_model=list[ParticipantRead])
async def list_group_chat_participants(
    event_id: str,
    settings: Settings = Depends(get_app_settings),
    participants: ParticipantDirectory = Depends(get_participant_directory),
    profiles: ProfileDirectory = Depends(get_profile_directory),
    current_user: ProfileRecord = Depends(get_current_user),
) -> list[ParticipantRead]:
    """Return the participants that can be mentioned in the event group chat."""

    roster = await resolve_roster(
        participants,
        profiles,
        event_id,
        aggregate_enabled=settings.roster_aggregate_enabled,
    )
    return [
        ParticipantRead(id=identity.id, name=identity.display_name, avatar=identity.avatar_url)
        for identity in roster
    ]


@router.post("/{event_id}/participants", response_model=MembershipResult)
async def join_event_group_chat(
    event_id: str,
    events: EventStore = Depends(get_event_store),
    participants: ParticipantDirectory = Depends(get_participant_directory),
    current_user: ProfileRecord = Depends(get_current_user),
) -> MembershipResult:
    await _get_event_or_404(events, event_id)
    success = await join_group_chat(participants, event_id, current_user.id)
    return MembershipResult(success=success)


@router.post("/{event_id}/participants/{talent_id}", response_model=MembershipResult)
async def add_talent(
    event_id: str,
    talent_id: str,
    events: EventStore = Depends(get_event_store),
    participants: ParticipantDirectory = Depends(get_participant_directory),
    current_user: ProfileRecord = Depends(get_current_user),
) -> MembershipResult:
    """Add a talent (and the event promoter) to the group chat."""

    await _get_event_or_404(events, event_id)
    success = await add_talent_to_group_chat(participants, events, event_id, talent_id)
    return MembershipResult(success=success)


@router.post("/{event_id}/group-chat", response_model=MembershipResult)
async def ensure_event_group_chat(
    event_id: str,
    events: EventStore = Depends(get_event_store),
    participants: ParticipantDirectory = Depends(get_participant_directory),
    current_user: ProfileRecord = Depends(get_current_user),
) -> MembershipResult:
    """Create the group chat for a new event by adding its promoter."""

    event = await _get_event_or_404(events, event_id)
    if event.promoter_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")
    success = await ensure_group_chat_for_event(participants, event_id, current_user.id)
    return MembershipResult(success=success)


@router.get("/{event_id}/group-chat/verify", response_model=GroupChatVerificationRead)
async def verify_event_group_chat(
    event_id: str,
    settings: Settings = Depends(get_app_settings),
    events: EventStore = Depends(get_event_store),
    participants: ParticipantDirectory = Depends(get_participant_directory),
    profiles: ProfileDirectory = Depends(get_profile_directory),
    current_user: ProfileRecord = Depends(get_current_user),
) -> GroupChatVerificationRead:
    event = await _get_event_or_404(events, event_id)
    verification = await verify_group_chat(
        participants,
        profiles,
        event_id,
        event.promoter_id or "",
        aggregate_enabled=settings.roster_aggregate_enabled,
    )
    return GroupChatVerificationRead(
        exists=verification.exists,
        promoter_participating=verification.promoter_participating,
        participant_count=verification.participant_count,
        participants=[
            GroupChatMemberRead(user_id=member.user_id, user_name=member.display_name)
            for member in verification.participants
        ],
    )


@router.post("/{event_id}/read", response_model=MembershipResult)
async def mark_event_group_chat_read(
    event_id: str,
    participants: ParticipantDirectory = Depends(get_participant_directory),
    current_user: ProfileRecord = Depends(get_current_user),
) -> MembershipResult:
    success = await mark_group_chat_read(participants, event_id, current_user.id)
    return MembershipResult(success=success)


@router.post(
    "/{event_id}/mentions",
    response_model=MentionsAccepted,
    status_code=status.HTTP_202_ACCEPTED,
)
async def notify_group_chat_mentions(
    event_id: str,
    payload: GroupChatMessageCreate,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(get_app_settings),
    events: EventStore = Depends(get_event_store),
    participants: ParticipantDirectory = Depends(get_participant_directory),
    profiles: ProfileDirectory = Depends(get_profile_directory),
    notifications: NotificationSink = Depends(get_notification_sink),
    current_user: ProfileRecord = Depends(get_current_user),
) -> MentionsAccepted:
    """Schedule mention notifications for a message the user just sent.

    The work runs after the response is returned; failures never reach the
    client.
    """

    await _get_event_or_404(events, event_id)
    if not await is_participant(participants, event_id, current_user.id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Not a group chat participant"
        )

    mentions = parse_mentions(payload.message_text)
    if mentions:
        sender_name = (payload.sender_name or "").strip() or identity_from_profile(
            current_user.id, current_user
        ).display_name
        background_tasks.add_task(
            notify_mentions,
            event_id,
            payload.message_text,
            current_user.id,
            sender_name,
            events=events,
            participants=participants,
            profiles=profiles,
            notifications=notifications,
            on_created=dispatch_notifications,
            aggregate_enabled=settings.roster_aggregate_enabled,
            timeout=settings.mention_notification_timeout_seconds,
        )
    return MentionsAccepted(mentions=mentions)


@participants_router.post("/recover", response_model=RecoveredParticipationRead)
async def recover_participation(
    participants: ParticipantDirectory = Depends(get_participant_directory),
    notifications: NotificationSink = Depends(get_notification_sink),
    current_user: ProfileRecord = Depends(get_current_user),
) -> RecoveredParticipationRead:
    """Join the current user to the group chats of events they were offered."""

    event_ids = await recover_group_chat_participation(
        participants, notifications, current_user.id
    )
    return RecoveredParticipationRead(event_ids=event_ids)
