# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - User: A stored user record, returned to clients
# - UserPayload: Request body for creating or updating a user
#
# Both serialize with PascalCase keys ("Id", "Name", "Email", "Age").
# Lowercase keys are accepted on input as well.
# =============================================================================

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A user record held in the store.

    Example:
        {
            "Id": 1,
            "Name": "Alice",
            "Email": "alice@example.com",
            "Age": 25
        }
    """

    # Unique within the store, assigned by the server on create
    id: int = Field(..., alias="Id", description="Unique user identifier")

    name: str = Field(..., alias="Name", description="Display name")

    email: str = Field(..., alias="Email", description="Email address")

    age: int = Field(..., alias="Age", description="Age in years")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "Id": 1,
                "Name": "Alice",
                "Email": "alice@example.com",
                "Age": 25,
            }
        },
    }


class UserPayload(BaseModel):
    """
    Request body for POST /users and PUT /users/{id}.

    Every field is optional here. Field rules (non-empty name, email with
    "@", positive age) are checked by UserService so that the first failing
    rule can be reported with a specific message. Types are checked strictly:
    "22", 22.0 and true are not accepted for an integer field.

    Example:
        {
            "Name": "Carol",
            "Email": "carol@x.com",
            "Age": 22
        }
    """

    # Only consulted on create, to reject an Id that is already taken
    id: int = Field(default=0, alias="Id")

    name: str | None = Field(default=None, alias="Name")

    email: str | None = Field(default=None, alias="Email")

    age: int = Field(default=0, alias="Age")

    model_config = {
        "populate_by_name": True,
        "strict": True,
        "json_schema_extra": {
            "examples": [
                {"Name": "Carol", "Email": "carol@x.com", "Age": 22},
            ]
        },
    }
