"""
In-process implementation of UserPort.

Holds records in a dict keyed by a generated hex id. Used for local
development (STORE_BACKEND=memory) and by the test suite.
"""

import uuid

from app.domain.models import User, UserCreate, UserFound, UserNotFound, UserResult, UserUpdate
from app.ports.user_port import UserPort


class InMemoryUserAdapter(UserPort):
    """Process-local user store. Not shared between workers."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def list_users(self) -> list[User]:
        return [user.model_copy() for user in self._users.values()]

    async def create_user(self, data: UserCreate) -> User:
        user = User(id=uuid.uuid4().hex, **data.model_dump())
        self._users[user.id] = user
        return user.model_copy()

    async def update_user(self, user_id: str, data: UserUpdate) -> UserResult:
        current = self._users.get(user_id)
        if current is None:
            return UserNotFound(user_id=user_id)
        updated = current.model_copy(update=data.changes())
        self._users[user_id] = updated
        return UserFound(user=updated.model_copy())

    async def delete_user(self, user_id: str) -> UserResult:
        removed = self._users.pop(user_id, None)
        if removed is None:
            return UserNotFound(user_id=user_id)
        return UserFound(user=removed)

    async def ping(self) -> None:
        return None
