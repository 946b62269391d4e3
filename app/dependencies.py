"""
Dependency Injection container.

Wires the abstract UserPort → a concrete adapter. To swap a store
(e.g., MongoDB → in-memory), change STORE_BACKEND. Nothing else in
the codebase changes.

The port instance is built once by the app factory and kept on
`app.state`; handlers receive it through `get_user_store`.
"""

from fastapi import Request

from app.adapters.memory_adapter import InMemoryUserAdapter
from app.adapters.mongo_adapter import MongoUserAdapter
from app.config import Settings
from app.ports.user_port import UserPort


def build_user_store(settings: Settings) -> UserPort:
    """Instantiate the adapter selected by configuration."""
    if settings.store_backend == "memory":
        return InMemoryUserAdapter()
    return MongoUserAdapter.from_url(
        settings.mongo_url,
        database=settings.mongo_db,
        collection=settings.mongo_collection,
        timeout_ms=settings.store_timeout_ms,
    )


# ── FastAPI Dependencies (return abstract types) ──────────────


def get_user_store(request: Request) -> UserPort:
    """Inject the user store attached to the running app."""
    return request.app.state.user_store
