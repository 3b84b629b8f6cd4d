"""Email signup model, schemas, and input validation."""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

# Minimal structural check: local@domain.tld, no whitespace, a single "@".
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class EmailSignup(BaseModel):
    """Stored waitlist signup. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    email: str
    created_at: datetime


# Pydantic schemas
class SignupCreate(BaseModel):
    """Schema for joining the waitlist."""

    email: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def check_email_shape(cls, value: str) -> str:
        if not EMAIL_PATTERN.fullmatch(value):
            raise PydanticCustomError("invalid_email", "Invalid email address")
        return value


class SignupResponse(BaseModel):
    """Public projection of a signup."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    email: str
    created_at: datetime = Field(alias="createdAt")


class SignupCreateResponse(BaseModel):
    """Response schema for a successful signup."""

    message: str
    signup: SignupResponse


class SignupListResponse(BaseModel):
    """Response schema for listing signups."""

    signups: list[SignupResponse]
    total: int


@dataclass(frozen=True)
class Valid:
    """Validation passed."""

    value: SignupCreate


@dataclass(frozen=True)
class Invalid:
    """Validation failed with field-level errors."""

    errors: list[dict[str, Any]]


SignupValidation = Valid | Invalid


def format_errors(exc: ValidationError) -> list[dict[str, Any]]:
    """
    Flatten a pydantic ValidationError into JSON-safe error entries.

    Args:
        exc: Validation error raised by pydantic

    Returns:
        List of ``{"path", "message", "code"}`` dicts
    """
    return [
        {
            "path": list(error["loc"]),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors(include_url=False, include_context=False, include_input=False)
    ]


def validate_signup(data: Any) -> SignupValidation:
    """
    Validate a raw signup payload.

    Args:
        data: Decoded request body (anything; non-objects are rejected)

    Returns:
        Valid with the parsed payload, or Invalid with the error list
    """
    try:
        return Valid(SignupCreate.model_validate(data))
    except ValidationError as e:
        return Invalid(format_errors(e))
