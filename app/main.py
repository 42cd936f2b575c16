# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the User Management API.
# It configures the FastAPI application with the middleware pipeline,
# routers and exception handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   user-management-api
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app.config import Settings, get_settings
from app.exceptions import (
    UserApiException,
    user_api_exception_handler,
    validation_exception_handler,
)
from app.middleware import PipelineMiddleware, build_default_pipeline
from app.routers import root, users
from core.store import UserStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if get_settings().DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Only logs; the store is created with the app and dies with the process.
    """
    settings = app.state.settings
    logger.info(f"Starting User Management API in {settings.ENVIRONMENT} mode")
    logger.info(f"Store holds {len(app.state.user_store)} users")

    yield

    logger.info("Shutting down User Management API")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build a fully wired application.

    Each call gets its own store, so tests can create isolated apps.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="User Management API",
        description="""
## In-memory user CRUD

Every endpoint except `/` requires `Authorization: Bearer <token>`.

| Method | Path | Result |
|--------|------|--------|
| POST | /users | 201 + created user |
| GET | /users | 200 + all users |
| GET | /users/{id} | 200 + user, or 404 |
| PUT | /users/{id} | 200 + updated user, or 400/404 |
| DELETE | /users/{id} | 204, or 404 |
""",
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "Create, read, update and delete users",
            },
            {
                "name": "Root",
                "description": "Public greeting",
            },
        ],
    )

    app.state.settings = settings
    app.state.user_store = UserStore.seeded() if settings.SEED_USERS else UserStore()

    # =========================================================================
    # Middleware
    # =========================================================================
    # Exception handler -> token validator -> logger -> route handler

    pipeline = build_default_pipeline(
        token=settings.API_TOKEN,
        public_paths=settings.public_paths_list,
    )
    app.add_middleware(PipelineMiddleware, pipeline=pipeline)

    # =========================================================================
    # Exception Handlers
    # =========================================================================
    # These run inside the routing layer, so the pipeline sees their
    # output as ordinary 400/404 responses.

    app.add_exception_handler(UserApiException, user_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(root.router, tags=["Root"])
    app.include_router(users.router, prefix="/users", tags=["Users"])

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn using the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
