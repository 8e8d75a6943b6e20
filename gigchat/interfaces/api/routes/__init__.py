from fastapi import FastAPI

from .group_chats import participants_router
from .group_chats import router as group_chats_router
from .notifications import router as notifications_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(group_chats_router)
    app.include_router(participants_router)
    app.include_router(notifications_router)
