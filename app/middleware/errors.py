# =============================================================================
# app/middleware/errors.py - Exception Handling Interceptor
# =============================================================================
# Outermost stage. Any exception raised by an inner stage or a route handler
# is logged and turned into a 500 with the generic error envelope, so no
# traceback or exception text ever reaches the client.
# =============================================================================

import logging

from app.exceptions import InternalServerError
from app.middleware.base import Interceptor, NextHandler

logger = logging.getLogger(__name__)


class ExceptionHandlingInterceptor(Interceptor):
    """Convert unhandled faults into 500 {"error": "Internal server error."}."""

    async def __call__(self, request, call_next: NextHandler):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                f"Unhandled error on {request.method} {request.url.path}: {exc}"
            )
            return InternalServerError().to_response()
