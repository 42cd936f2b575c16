# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles user CRUD operations and field validation.
# Separates HTTP concerns from store access.
# =============================================================================

import logging

from core.models.user import User, UserPayload
from core.store import UserStore
from app.exceptions import UserNotFoundError, UserValidationError

logger = logging.getLogger(__name__)


def validate_fields(payload: UserPayload) -> None:
    """
    Check Name, then Email, then Age.

    The first failing rule wins.

    Raises:
        UserValidationError: With the reason for the first failing rule
    """
    if not payload.name or not payload.name.strip():
        raise UserValidationError("Name is required.")

    if not payload.email or not payload.email.strip() or "@" not in payload.email:
        raise UserValidationError("A valid Email is required.")

    if payload.age <= 0:
        raise UserValidationError("Age must be greater than 0.")


class UserService:
    """
    Service for user management operations.

    Provides a clean interface between API routes and the store.
    Every failed operation leaves the store untouched.
    """

    def __init__(self, store: UserStore):
        self.store = store

    def list_users(self) -> list[User]:
        return self.store.list()

    def get_user(self, user_id: int) -> User:
        """
        Get a user by Id.

        Raises:
            UserNotFoundError: If no user has this Id
        """
        user = self.store.find(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def create_user(self, payload: UserPayload) -> User:
        """
        Validate and store a new user.

        A non-zero client Id is only checked against existing records. The
        stored user always gets a freshly generated Id, even when the
        client's Id was free.

        Returns:
            The created user with its assigned Id

        Raises:
            UserValidationError: If a field is invalid or the client Id is taken
        """
        validate_fields(payload)

        if payload.id != 0 and payload.id in self.store:
            raise UserValidationError(f"User with Id {payload.id} already exists.")

        user = User(
            id=payload.id,
            name=payload.name,
            email=payload.email,
            age=payload.age,
        )
        self.store.insert(user)
        logger.info(f"Created user: {user.id}")
        return user

    def update_user(self, user_id: int, payload: UserPayload) -> User:
        """
        Overwrite all fields except Id of an existing user.

        Existence is checked before the fields are validated.

        Raises:
            UserNotFoundError: If no user has this Id
            UserValidationError: If a field is invalid
        """
        if user_id not in self.store:
            raise UserNotFoundError(user_id)

        validate_fields(payload)

        user = self.store.replace(user_id, payload)
        logger.info(f"Updated user: {user_id}")
        return user

    def delete_user(self, user_id: int) -> None:
        """
        Remove a user.

        Raises:
            UserNotFoundError: If no user has this Id
        """
        if not self.store.remove(user_id):
            raise UserNotFoundError(user_id)
        logger.info(f"Deleted user: {user_id}")
