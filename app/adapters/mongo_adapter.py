"""
Concrete implementation of UserPort using the PyMongo async driver.
"""

import logging
from typing import Any

from bson import ObjectId
from pymongo import AsyncMongoClient, ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from app.domain.errors import PersistenceError
from app.domain.models import User, UserCreate, UserFound, UserNotFound, UserResult, UserUpdate
from app.ports.user_port import UserPort

logger = logging.getLogger(__name__)


def _plain(value: Any) -> Any:
    """Replace BSON ObjectIds (also nested ones) with their hex string."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def _to_user(doc: dict[str, Any]) -> User:
    """Map a Mongo document (`_id`) to the API shape (`id`)."""
    data = _plain(doc)
    data["id"] = data.pop("_id")
    return User.model_validate(data)


class MongoUserAdapter(UserPort):
    """All user I/O goes through a single MongoDB collection."""

    def __init__(
        self,
        collection: AsyncCollection,
        client: AsyncMongoClient | None = None,
    ) -> None:
        self._collection = collection
        self._client = client

    @classmethod
    def from_url(
        cls,
        url: str,
        database: str,
        collection: str,
        timeout_ms: int = 5000,
    ) -> "MongoUserAdapter":
        # Constructing the client does not connect; the first operation does.
        client: AsyncMongoClient = AsyncMongoClient(
            url,
            timeoutMS=timeout_ms,
            serverSelectionTimeoutMS=timeout_ms,
        )
        return cls(collection=client[database][collection], client=client)

    # ── Users ─────────────────────────────────────────────────

    async def list_users(self) -> list[User]:
        try:
            docs = await self._collection.find().to_list()
        except PyMongoError as exc:
            raise PersistenceError(str(exc)) from exc
        return [_to_user(doc) for doc in docs]

    async def create_user(self, data: UserCreate) -> User:
        doc = data.model_dump()
        try:
            result = await self._collection.insert_one(doc)
        except PyMongoError as exc:
            raise PersistenceError(str(exc)) from exc
        return User(id=str(result.inserted_id), **data.model_dump())

    async def update_user(self, user_id: str, data: UserUpdate) -> UserResult:
        # A malformed id can never match a stored record
        if not ObjectId.is_valid(user_id):
            return UserNotFound(user_id=user_id)

        query = {"_id": ObjectId(user_id)}
        changes = data.changes()
        try:
            if changes:
                doc = await self._collection.find_one_and_update(
                    query,
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                # Mongo rejects an empty $set
                doc = await self._collection.find_one(query)
        except PyMongoError as exc:
            raise PersistenceError(str(exc)) from exc

        if doc is None:
            return UserNotFound(user_id=user_id)
        return UserFound(user=_to_user(doc))

    async def delete_user(self, user_id: str) -> UserResult:
        if not ObjectId.is_valid(user_id):
            return UserNotFound(user_id=user_id)

        try:
            doc = await self._collection.find_one_and_delete({"_id": ObjectId(user_id)})
        except PyMongoError as exc:
            raise PersistenceError(str(exc)) from exc

        if doc is None:
            return UserNotFound(user_id=user_id)
        return UserFound(user=_to_user(doc))

    # ── Lifecycle ─────────────────────────────────────────────

    async def ping(self) -> None:
        try:
            await self._collection.database.command("ping")
        except PyMongoError as exc:
            raise PersistenceError(str(exc)) from exc

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            logger.info("MongoDB client closed")
