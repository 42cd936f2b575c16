# =============================================================================
# app/middleware/asgi.py - Mounting a Pipeline on the ASGI App
# =============================================================================
# Starlette's BaseHTTPMiddleware already speaks the (request, call_next)
# contract the interceptors use, so the whole pipeline runs as a single
# Starlette middleware with call_next as the final handler.
#
# Exceptions raised by route handlers come back out of call_next, which is
# how they reach ExceptionHandlingInterceptor.
# =============================================================================

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.middleware.base import MiddlewarePipeline


class PipelineMiddleware(BaseHTTPMiddleware):
    """
    Run every HTTP request through a MiddlewarePipeline.

    Usage:
        app.add_middleware(PipelineMiddleware, pipeline=pipeline)
    """

    def __init__(self, app: ASGIApp, pipeline: MiddlewarePipeline):
        super().__init__(app)
        self.pipeline = pipeline

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint
    ) -> Response:
        return await self.pipeline.handle(request, call_next)
