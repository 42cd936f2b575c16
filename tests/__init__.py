# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the User Management API:
# - test_models.py: Pydantic model parsing and serialization
# - test_store.py: In-memory store operations and Id assignment
# - test_user_service.py: Validation rules and CRUD business logic
# - test_middleware.py: Interceptor pipeline, without a web framework
# - test_config.py: Settings defaults and parsing
# - test_api.py: End-to-end endpoint tests through the full pipeline
#
# Run tests with: pytest
# =============================================================================
