# =============================================================================
# app/middleware/base.py - Interceptor Interface and Pipeline
# =============================================================================
# Chain of Responsibility for request interceptors.
#
# Each interceptor receives the request and a continuation (call_next) that
# runs the rest of the pipeline. It may:
# - inspect or modify the request
# - short-circuit by returning a response without calling call_next
# - call call_next and inspect or modify the response
# - let an error propagate
#
#   Request ─────────────────────────────────────────────►
#
#   ┌───────────┐    ┌───────────┐    ┌───────────┐    ┌─────────┐
#   │ Exception │───►│   Token   │───►│  Logging  │───►│ Handler │
#   │  handler  │    │ validator │    │           │    │         │
#   └───────────┘    └───────────┘    └───────────┘    └─────────┘
#
#   ◄───────────────────────────────────────────── Response
#
# Nothing here depends on a web framework. Requests and responses are
# whatever objects the final handler accepts and returns.
# =============================================================================

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)


# The rest of the pipeline: takes a request, returns a response
NextHandler = Callable[[Any], Awaitable[Any]]


class Interceptor(ABC):
    """
    Abstract base class for one pipeline stage.

    Subclasses implement __call__:

        class MyInterceptor(Interceptor):
            async def __call__(self, request, call_next):
                if not allowed(request):
                    return forbidden()          # short-circuit
                response = await call_next(request)
                response.headers["X-Seen"] = "1"
                return response
    """

    @abstractmethod
    async def __call__(self, request: Any, call_next: NextHandler) -> Any:
        """
        Process the request.

        Args:
            request: The incoming request
            call_next: Continuation running the inner stages and the handler

        Returns:
            A response, either from call_next or produced here
        """

    @property
    def name(self) -> str:
        """Get the interceptor name for logging."""
        return self.__class__.__name__


class MiddlewarePipeline:
    """
    Ordered list of interceptors wrapped around a final handler.

    The first interceptor added is the outermost:

        pipeline = MiddlewarePipeline()
        pipeline.use(ExceptionHandlingInterceptor(), TokenValidationInterceptor(token))
        handler = pipeline.wrap(route_handler)
        response = await handler(request)

    gives ExceptionHandling(TokenValidation(route_handler)).
    """

    def __init__(self, interceptors: list[Interceptor] | None = None):
        self._interceptors: list[Interceptor] = []
        for interceptor in interceptors or []:
            self.add(interceptor)

    def add(self, interceptor: Interceptor) -> "MiddlewarePipeline":
        """Append an interceptor inside those already added."""
        self._interceptors.append(interceptor)
        logger.debug(f"Added interceptor: {interceptor.name}")
        return self

    def use(self, *interceptors: Interceptor) -> "MiddlewarePipeline":
        for interceptor in interceptors:
            self.add(interceptor)
        return self

    @property
    def interceptors(self) -> list[Interceptor]:
        return list(self._interceptors)

    def __len__(self) -> int:
        return len(self._interceptors)

    def wrap(self, handler: NextHandler) -> NextHandler:
        """
        Build the chain around a final handler.

        Interceptors are wrapped in reverse so the first added ends up
        outermost: [A, B, C] -> A(B(C(handler))).
        """
        current = handler
        for interceptor in reversed(self._interceptors):
            current = self._bind(interceptor, current)
        return current

    async def handle(self, request: Any, handler: NextHandler) -> Any:
        """Run a request through the pipeline and the given final handler."""
        return await self.wrap(handler)(request)

    @staticmethod
    def _bind(interceptor: Interceptor, next_handler: NextHandler) -> NextHandler:
        async def bound(request: Any) -> Any:
            return await interceptor(request, next_handler)

        bound.__name__ = f"{interceptor.name}_handler"
        return bound
