"""Unit tests for signup payload validation."""

import pytest

from models.signup import Invalid, SignupCreate, Valid, validate_signup


def test_validate_signup_accepts_plain_email():
    result = validate_signup({"email": "artist@studio.com"})

    assert isinstance(result, Valid)
    assert result.value == SignupCreate(email="artist@studio.com")


def test_validate_signup_keeps_email_unchanged():
    """Test: No trimming or lowercasing."""
    result = validate_signup({"email": "Artist@Studio.COM"})

    assert isinstance(result, Valid)
    assert result.value.email == "Artist@Studio.COM"


def test_validate_signup_ignores_extra_fields():
    result = validate_signup({"email": "a@example.com", "name": "Ada"})

    assert isinstance(result, Valid)


@pytest.mark.parametrize(
    "email",
    [
        "not-an-email",
        "missing-at.example.com",
        "no-tld@example",
        "two@@example.com",
        "spa ce@example.com",
        " a@example.com",
        "@example.com",
        "a@.com",
    ],
)
def test_validate_signup_rejects_malformed_email(email):
    result = validate_signup({"email": email})

    assert isinstance(result, Invalid)
    assert result.errors[0]["path"] == ["email"]
    assert result.errors[0]["code"] == "invalid_email"


def test_validate_signup_rejects_empty_email():
    result = validate_signup({"email": ""})

    assert isinstance(result, Invalid)
    assert result.errors[0]["path"] == ["email"]
    assert result.errors[0]["code"] == "string_too_short"


def test_validate_signup_requires_email():
    result = validate_signup({})

    assert isinstance(result, Invalid)
    assert result.errors == [{"path": ["email"], "message": "Field required", "code": "missing"}]


@pytest.mark.parametrize("payload", [None, [], "a@example.com", 42])
def test_validate_signup_rejects_non_object(payload):
    result = validate_signup(payload)

    assert isinstance(result, Invalid)
    assert result.errors


def test_validate_signup_rejects_non_string_email():
    result = validate_signup({"email": 123})

    assert isinstance(result, Invalid)
    assert result.errors[0]["code"] == "string_type"
