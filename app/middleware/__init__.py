# =============================================================================
# app/middleware/ - Request Interceptor Pipeline
# =============================================================================
# - base.py: Interceptor interface and MiddlewarePipeline (framework-free)
# - errors.py: Converts unhandled faults into a generic 500
# - auth.py: Bearer token validation
# - logging.py: Request/response logging
# - asgi.py: Mounts a pipeline on the FastAPI app
#
# Default order, outermost first:
#   ExceptionHandling -> TokenValidation -> RequestLogging -> route handler
# =============================================================================

from app.middleware.asgi import PipelineMiddleware
from app.middleware.auth import TokenValidationInterceptor
from app.middleware.base import Interceptor, MiddlewarePipeline, NextHandler
from app.middleware.errors import ExceptionHandlingInterceptor
from app.middleware.logging import RequestLoggingInterceptor


def build_default_pipeline(token: str, public_paths: list[str]) -> MiddlewarePipeline:
    """Exception handler, then token validator, then logger."""
    return MiddlewarePipeline().use(
        ExceptionHandlingInterceptor(),
        TokenValidationInterceptor(token=token, public_paths=public_paths),
        RequestLoggingInterceptor(),
    )


__all__ = [
    "Interceptor",
    "MiddlewarePipeline",
    "NextHandler",
    "PipelineMiddleware",
    "ExceptionHandlingInterceptor",
    "TokenValidationInterceptor",
    "RequestLoggingInterceptor",
    "build_default_pipeline",
]
