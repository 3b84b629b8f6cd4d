"""Signup endpoints - public waitlist form backend."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status

from api.deps import get_db
from api.errors import InternalServerError, InvalidSignupError, WaitlistAPIError
from db import MemoryStore
from models.signup import (
    Invalid,
    SignupCreateResponse,
    SignupListResponse,
    SignupResponse,
    validate_signup,
)
from services import signups_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signup", response_model=SignupCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_signup(
    payload: Any = Body(default=None),
    db: MemoryStore = Depends(get_db),
):
    """
    Join the waitlist.

    This is a public endpoint - no authentication required.

    Args:
        payload: Raw JSON body, expected as ``{"email": str}``
        db: Signup store

    Returns:
        SignupCreateResponse: Confirmation message and the new signup

    Raises:
        InvalidSignupError: 400 if the payload fails validation
        DuplicateSignupError: 400 if the email is already registered
        InternalServerError: 500 for anything unexpected
    """
    result = validate_signup(payload)
    if isinstance(result, Invalid):
        raise InvalidSignupError(result.errors)

    try:
        signup = await signups_service.register_signup(db, payload=result.value)
        return SignupCreateResponse(
            message="Successfully joined the waitlist",
            signup=SignupResponse.model_validate(signup),
        )
    except WaitlistAPIError:
        raise
    except Exception:
        logger.exception("Signup error")
        raise InternalServerError()


@router.get("/signups", response_model=SignupListResponse)
async def list_signups(db: MemoryStore = Depends(get_db)):
    """
    List every signup, most recent first.

    Returns:
        SignupListResponse: Projected signups and their count
    """
    try:
        signups = await signups_service.list_signups(db)
        return SignupListResponse(
            signups=[SignupResponse.model_validate(signup) for signup in signups],
            total=len(signups),
        )
    except Exception:
        logger.exception("Get signups error")
        raise InternalServerError()
