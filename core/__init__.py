# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the user management logic:
# - models/: Pydantic schemas for user records and request bodies
# - store.py: In-memory user store
# - services/: Validation and CRUD operations on top of the store
# =============================================================================
