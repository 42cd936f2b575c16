# =============================================================================
# core/store.py - In-Memory User Store
# =============================================================================
# Holds user records for the lifetime of the process.
#
# Records live in a dict keyed by Id, so lookups don't scan and iteration
# follows insertion order. Replacing a record keeps its position.
#
# Not thread-safe: concurrent inserts can race on Id assignment.
# Nothing is persisted.
# =============================================================================

import logging
from typing import Iterable

from core.models.user import User, UserPayload

logger = logging.getLogger(__name__)


# Records the store starts with when seeding is enabled
SEED_USERS = [
    {"id": 1, "name": "Alice", "email": "alice@example.com", "age": 25},
    {"id": 2, "name": "Bob", "email": "bob@example.com", "age": 30},
]


class UserStore:
    """
    Ordered, in-process collection of User records.

    Usage:
        store = UserStore.seeded()
        new_id = store.insert(User(id=0, name="Carol", email="c@x.com", age=22))
        store.find(new_id)
    """

    def __init__(self, users: Iterable[User] | None = None):
        self._users: dict[int, User] = {}
        for user in users or []:
            self._users[user.id] = user

    @classmethod
    def seeded(cls) -> "UserStore":
        """Create a store holding the default Alice and Bob records."""
        return cls(User(**data) for data in SEED_USERS)

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, user_id: int) -> bool:
        return user_id in self._users

    def list(self) -> list[User]:
        """Return all users in insertion order."""
        return list(self._users.values())

    def find(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def next_id(self) -> int:
        """
        Id the next insert will receive.

        max(existing Ids) + 1, or 1 when the store is empty. After the
        highest record is deleted its Id is handed out again.
        """
        return max(self._users, default=0) + 1

    def insert(self, user: User) -> int:
        """
        Add a user, overwriting whatever Id it carried.

        Returns:
            The assigned Id
        """
        user.id = self.next_id()
        self._users[user.id] = user
        logger.info(f"Inserted user: {user.id}")
        return user.id

    def replace(self, user_id: int, fields: UserPayload) -> User | None:
        """
        Overwrite Name, Email and Age of an existing user in place.

        The Id and the record's position are kept.

        Returns:
            The updated user, or None if no user has this Id
        """
        user = self._users.get(user_id)
        if user is None:
            return None

        user.name = fields.name
        user.email = fields.email
        user.age = fields.age
        logger.info(f"Replaced user: {user_id}")
        return user

    def remove(self, user_id: int) -> bool:
        """Delete a user. Returns False if no user has this Id."""
        if self._users.pop(user_id, None) is None:
            return False
        logger.info(f"Removed user: {user_id}")
        return True
