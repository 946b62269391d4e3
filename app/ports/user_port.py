from abc import ABC, abstractmethod

from app.domain.models import User, UserCreate, UserResult, UserUpdate


class UserPort(ABC):
    """
    Identifier-addressed CRUD access to the User collection.

    Store failures raise `PersistenceError`. A missing (or malformed) id
    is not a failure: update/delete return `UserNotFound` instead.
    """

    @abstractmethod
    async def list_users(self) -> list[User]:
        """Return every user in the collection (store-defined order)."""
        ...

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User:
        """Insert a user; the store assigns the id."""
        ...

    @abstractmethod
    async def update_user(self, user_id: str, data: UserUpdate) -> UserResult:
        """Apply the supplied fields and return the post-update record."""
        ...

    @abstractmethod
    async def delete_user(self, user_id: str) -> UserResult:
        """Remove a user and return the record as it was before deletion."""
        ...

    @abstractmethod
    async def ping(self) -> None:
        """Round-trip to the store. Raises `PersistenceError` if unreachable."""
        ...

    async def close(self) -> None:
        """Release driver resources. No-op by default."""
        return None
