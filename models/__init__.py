"""Data models."""

from models.signup import EmailSignup
from models.user import User

__all__ = [
    "EmailSignup",
    "User",
]
