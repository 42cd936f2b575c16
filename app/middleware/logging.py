# =============================================================================
# app/middleware/logging.py - Request/Response Logging Interceptor
# =============================================================================
# Innermost stage, right before the route handlers.
# Logs the method and path on the way in and the status code on the way out.
# =============================================================================

import logging
import time

from app.middleware.base import Interceptor, NextHandler

logger = logging.getLogger(__name__)


class RequestLoggingInterceptor(Interceptor):
    """Log every request that reaches the route handlers."""

    async def __call__(self, request, call_next: NextHandler):
        method = request.method
        path = request.url.path
        logger.info(f"Incoming request: {method} {path}")

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            f"Outgoing response: {method} {path} -> {response.status_code} "
            f"({elapsed_ms:.1f}ms)"
        )
        return response
