"""In-memory store and request-scoped access to it."""

import asyncio
from collections.abc import Callable
from datetime import datetime, UTC
from uuid import UUID

from fastapi import Request

from models.signup import EmailSignup
from models.user import User


def utc_now() -> datetime:
    """Default clock for record timestamps."""
    return datetime.now(UTC)


class MemoryStore:
    """
    Process-lifetime backing collections for signups and users.

    Starts empty and is discarded with the application. Records are keyed by
    their generated id. ``lock`` serializes multi-step sequences such as
    check-then-insert; single operations do not take it.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self.clock = clock
        self.email_signups: dict[UUID, EmailSignup] = {}
        self.users: dict[UUID, User] = {}
        self.lock = asyncio.Lock()


async def init_db(app) -> MemoryStore:
    """
    Create a fresh store and attach it to the application.
    This should be called on application startup.
    """
    store = MemoryStore()
    app.state.store = store
    return store


async def close_db(app) -> None:
    """
    Drop the application's store.
    This should be called on application shutdown.
    """
    app.state.store = None


async def get_db(request: Request) -> MemoryStore:
    """
    Dependency function to get the application's store.

    Returns:
        MemoryStore: Store created during application startup
    """
    return request.app.state.store
