"""API error types and their JSON rendering."""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class WaitlistAPIError(Exception):
    """
    Base error rendered as ``{"message": ..., "errors": [...]}``.

    ``errors`` is omitted from the body when empty.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class InvalidSignupError(WaitlistAPIError):
    """Raised when a signup payload fails schema validation."""

    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__(
            message="Invalid email format",
            status_code=status.HTTP_400_BAD_REQUEST,
            errors=errors,
        )


class DuplicateSignupError(WaitlistAPIError):
    """Raised when the email is already on the waitlist."""

    def __init__(self, email: str):
        super().__init__(
            message="This email is already on the waitlist",
            status_code=status.HTTP_400_BAD_REQUEST,
        )
        self.email = email


class InternalServerError(WaitlistAPIError):
    """Generic failure; never carries internal detail."""

    def __init__(self):
        super().__init__(message="Internal server error")


async def waitlist_error_handler(request: Request, exc: WaitlistAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed bodies (e.g. invalid JSON) like schema failures."""
    errors = [
        {
            "path": [str(part) for part in error.get("loc", ())],
            "message": error.get("msg", ""),
            "code": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    return await waitlist_error_handler(request, InvalidSignupError(errors))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected exceptions and hide their details from the caller."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return await waitlist_error_handler(request, InternalServerError())


__all__ = [
    "DuplicateSignupError",
    "InternalServerError",
    "InvalidSignupError",
    "WaitlistAPIError",
    "request_validation_handler",
    "unhandled_error_handler",
    "waitlist_error_handler",
]
