"""Repository for EmailSignup store operations."""

from uuid import uuid4

from db import MemoryStore
from models.signup import EmailSignup


async def create(store: MemoryStore, *, email: str) -> EmailSignup:
    """
    Create a new signup with a fresh id and the current timestamp.

    No validation or duplicate check happens here: calling this twice with
    the same email stores two records.

    Args:
        store: Backing store
        email: Email address, stored as given

    Returns:
        Created signup
    """
    signup_id = uuid4()
    while signup_id in store.email_signups:
        signup_id = uuid4()

    signup = EmailSignup(id=signup_id, email=email, created_at=store.clock())
    store.email_signups[signup.id] = signup
    return signup


async def get_by_email(store: MemoryStore, *, email: str) -> EmailSignup | None:
    """
    Get the first signup whose email matches exactly (case-sensitive).

    Args:
        store: Backing store
        email: Email address to look up

    Returns:
        EmailSignup if found, None otherwise
    """
    return next(
        (signup for signup in store.email_signups.values() if signup.email == email),
        None,
    )


async def list(store: MemoryStore) -> list[EmailSignup]:
    """
    List all signups, most recent first.

    Args:
        store: Backing store

    Returns:
        Signups sorted by created_at descending
    """
    return sorted(
        store.email_signups.values(),
        key=lambda signup: signup.created_at,
        reverse=True,
    )
