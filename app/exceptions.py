# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized error taxonomy for the API:
# - UserValidationError (400): a field the client can fix
# - UserNotFoundError (404): no user has the requested Id
# - AuthError (401): missing or invalid bearer token
# - InternalServerError (500): anything unexpected
#
# Validation and not-found errors answer with a plain-text body.
# Auth and server errors answer with the envelope {"error": "<message>"}.
# =============================================================================

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response


class UserApiException(Exception):
    """
    Base exception for the User Management API.

    All custom exceptions inherit from this class and know how to render
    themselves as an HTTP response.
    """

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_response(self) -> Response:
        """Convert exception to a plain-text API response."""
        return PlainTextResponse(self.message, status_code=self.status_code)


class EnvelopedError(UserApiException):
    """Errors rendered as {"error": message} instead of plain text."""

    headers: dict[str, str] | None = None

    def to_response(self) -> Response:
        return JSONResponse(
            status_code=self.status_code,
            content={"error": self.message},
            headers=self.headers,
        )


# =============================================================================
# Client Errors
# =============================================================================

class UserValidationError(UserApiException):
    """Raised when a user field fails validation."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class UserNotFoundError(UserApiException):
    """Raised when a user Id doesn't exist."""

    def __init__(self, user_id: int):
        super().__init__(f"User with Id {user_id} not found.", status_code=404)
        self.user_id = user_id


class AuthError(EnvelopedError):
    """Raised when the bearer token is missing or doesn't match."""

    headers = {"WWW-Authenticate": "Bearer"}

    def __init__(self, message: str):
        super().__init__(message, status_code=401)


# =============================================================================
# Server Errors
# =============================================================================

class InternalServerError(EnvelopedError):
    """Generic 500. Never carries details of the underlying fault."""

    def __init__(self):
        super().__init__("Internal server error.", status_code=500)


# =============================================================================
# Exception Handlers
# =============================================================================

INVALID_BODY_MESSAGE = "Invalid request body."


async def user_api_exception_handler(
    request: Request,
    exc: UserApiException
) -> Response:
    """Convert UserApiException to its HTTP response."""
    return exc.to_response()


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> Response:
    """
    Handle request parsing errors.

    Malformed JSON or wrongly typed fields become a 400 with a
    plain-text reason, like any other validation failure.
    """
    return UserValidationError(INVALID_BODY_MESSAGE).to_response()
