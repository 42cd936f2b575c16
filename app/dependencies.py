# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

import re
from typing import Annotated

from fastapi import Depends, Path, Request

from app.exceptions import UserValidationError
from core.services.user_service import UserService
from core.store import UserStore

# Optional sign and surrounding whitespace, ASCII digits only
USER_ID_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)

# Ids are 32-bit signed integers
MIN_USER_ID = -(2**31)
MAX_USER_ID = 2**31 - 1


def get_user_store(request: Request) -> UserStore:
    """
    Get the store attached to the running app.

    create_app() puts one UserStore on app.state; every request shares it.
    """
    return request.app.state.user_store


UserStoreDep = Annotated[UserStore, Depends(get_user_store)]


def get_user_service(store: UserStoreDep) -> UserService:
    return UserService(store)


def parse_user_id(
    user_id: Annotated[str, Path(description="User Id")],
) -> int:
    """
    Parse the {user_id} path segment.

    Accepts "+1" and " 1 ", rejects "1_0", non-ASCII digits and values
    outside the 32-bit signed range.

    Raises:
        UserValidationError: If the segment is not an integer Id
    """
    if not USER_ID_PATTERN.fullmatch(user_id):
        raise UserValidationError("Id must be an integer.")

    value = int(user_id)
    if not MIN_USER_ID <= value <= MAX_USER_ID:
        raise UserValidationError("Id must be an integer.")
    return value


# Type aliases for dependency injection
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
UserIdDep = Annotated[int, Depends(parse_user_id)]
