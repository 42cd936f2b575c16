# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_service import UserService, validate_fields

__all__ = [
    "UserService",
    "validate_fields",
]
