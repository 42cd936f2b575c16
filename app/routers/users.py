# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# Five operations over the in-memory user store.
# All endpoints require the bearer token (checked by the middleware pipeline).
#
# Failures are raised by UserService and rendered by the app's exception
# handlers as plain text:
# - 400: a field failed validation, or the path Id isn't an integer
# - 404: no user has the requested Id
# =============================================================================

from fastapi import APIRouter, Response, status

from app.dependencies import UserIdDep, UserServiceDep
from core.models.user import User, UserPayload

router = APIRouter()


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserPayload,
    service: UserServiceDep,
    response: Response,
):
    """
    Create a user.

    The Id is always generated by the server. A client-supplied Id that is
    already taken is rejected.
    """
    user = service.create_user(payload)
    response.headers["Location"] = f"/users/{user.id}"
    return user


@router.get("", response_model=list[User])
async def list_users(service: UserServiceDep):
    """List all users in insertion order."""
    return service.list_users()


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: UserIdDep, service: UserServiceDep):
    """Get a single user by Id."""
    return service.get_user(user_id)


@router.put("/{user_id}", response_model=User)
async def update_user(
    user_id: UserIdDep,
    payload: UserPayload,
    service: UserServiceDep,
):
    """
    Replace Name, Email and Age of an existing user.

    Returns 404 before validating fields when the user doesn't exist.
    """
    return service.update_user(user_id, payload)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: UserIdDep, service: UserServiceDep):
    """Delete a user. Returns 204 with an empty body."""
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
