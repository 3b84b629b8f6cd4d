"""Service layer for waitlist signup business logic."""

import logging

from api.errors import DuplicateSignupError
from db import MemoryStore
from models.signup import EmailSignup, SignupCreate
from repos import signups_repo

logger = logging.getLogger(__name__)


async def register_signup(store: MemoryStore, *, payload: SignupCreate) -> EmailSignup:
    """
    Add an email to the waitlist unless it is already there.

    The duplicate check and the insert run under the store lock so that two
    submissions of the same email cannot both pass the check.

    Args:
        store: Backing store
        payload: Validated signup data

    Returns:
        Created signup

    Raises:
        DuplicateSignupError: If a signup with the same email exists
    """
    async with store.lock:
        existing = await signups_repo.get_by_email(store, email=payload.email)
        if existing:
            logger.info("Rejected duplicate signup (existing id=%s)", existing.id)
            raise DuplicateSignupError(payload.email)

        signup = await signups_repo.create(store, email=payload.email)

    logger.info("Created signup id=%s", signup.id)
    return signup


async def list_signups(store: MemoryStore) -> list[EmailSignup]:
    """List every signup, most recent first."""
    return await signups_repo.list(store)
