# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds a fresh app (and store) for every test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("API_TOKEN", "my-secret-token")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.store import UserStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Settings with the default token and seeded store."""
    return Settings(API_TOKEN="my-secret-token", PUBLIC_PATHS="/", SEED_USERS=True)


@pytest.fixture
def app(settings):
    """A freshly wired application with its own store."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client that runs the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store(app) -> UserStore:
    """The store behind the `app` fixture."""
    return app.state.user_store


@pytest.fixture
def auth_headers():
    """Headers carrying the valid bearer token."""
    return {"Authorization": "Bearer my-secret-token"}


@pytest.fixture
def carol():
    """Sample valid user payload."""
    return {"Name": "Carol", "Email": "carol@x.com", "Age": 22}
