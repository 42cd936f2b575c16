# =============================================================================
# app/middleware/auth.py - Bearer Token Validation Interceptor
# =============================================================================
# Requires "Authorization: Bearer <API_TOKEN>" on every request whose path is
# not public. Rejections short-circuit with a 401 before any route handler
# runs, so handlers never see unauthenticated requests.
#
# Usage:
#   TokenValidationInterceptor(token=settings.API_TOKEN, public_paths=["/"])
# =============================================================================

import logging
import secrets
from typing import Iterable

from app.exceptions import AuthError
from app.middleware.base import Interceptor, NextHandler

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "Unauthorized: Missing token."
INVALID_TOKEN_MESSAGE = "Unauthorized: Invalid token."


class TokenValidationInterceptor(Interceptor):
    """
    Compare the Authorization header against a single configured token.

    Missing header -> 401 "Unauthorized: Missing token."
    Anything but exactly "Bearer <token>" -> 401 "Unauthorized: Invalid token."
    """

    def __init__(self, token: str, public_paths: Iterable[str] = ()):
        self.expected = f"Bearer {token}"
        self.public_paths = frozenset(public_paths)

    def is_public(self, path: str) -> bool:
        return path in self.public_paths

    async def __call__(self, request, call_next: NextHandler):
        if self.is_public(request.url.path):
            return await call_next(request)

        authorization = request.headers.get("Authorization")

        if authorization is None:
            logger.warning(f"Missing token: {request.method} {request.url.path}")
            return AuthError(MISSING_TOKEN_MESSAGE).to_response()

        if not secrets.compare_digest(authorization.encode(), self.expected.encode()):
            logger.warning(f"Invalid token: {request.method} {request.url.path}")
            return AuthError(INVALID_TOKEN_MESSAGE).to_response()

        return await call_next(request)
