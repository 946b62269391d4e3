"""
users.api — FastAPI Application Entry Point

Builds the user store, registers routers, and serves the API.
Run locally with: python main.py
"""

import contextlib
import logging
import traceback

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from app.config import Settings, get_settings
from app.dependencies import build_user_store
from app.domain.errors import PersistenceError
from app.domain.models import HealthResponse
from app.ports.user_port import UserPort
from app.routers import users

# ── Logging ───────────────────────────────────────────────────
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
)
logger = logging.getLogger(__name__)


# ── App factory ───────────────────────────────────────────────
def create_app(settings: Settings | None = None, store: UserPort | None = None) -> FastAPI:
    """
    Build the application.

    `store` overrides the adapter selected by `settings.store_backend`
    (tests pass an in-memory or failing store here).
    """
    settings = settings or get_settings()
    logging.getLogger().setLevel(settings.log_level)

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(f"🚀 {settings.app_name} is starting up")
        app.state.user_store = store if store is not None else build_user_store(settings)
        try:
            await app.state.user_store.ping()
            logger.info("✅ User store connected")
        except PersistenceError as exc:
            # Keep serving; store-backed requests fail until it is reachable
            logger.error(f"❌ User store connection error: {exc.message}")
        try:
            yield
        finally:
            # Shutdown
            await app.state.user_store.close()
            logger.info(f"🛑 {settings.app_name} is shutting down")

    app = FastAPI(
        title=settings.app_name,
        description="CRUD REST API over a single User collection.",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # ── Global Exception Handler ─────────────────────────────
    # Nothing raised inside a handler reaches the client as a raw error
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: "
            f"{type(exc).__name__}: {exc}\n{traceback.format_exc()}"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": f"Internal server error: {type(exc).__name__}"},
        )

    # ── Routers ──────────────────────────────────────────────
    app.include_router(users.router)

    # ── Root & Health ────────────────────────────────────────
    @app.get("/", tags=["Health"], response_class=PlainTextResponse)
    async def root():
        return "Hello from FastAPI + MongoDB!"

    @app.get(
        "/health",
        tags=["Health"],
        response_model=HealthResponse,
        response_model_exclude_none=True,
    )
    async def health_check(request: Request):
        try:
            await request.app.state.user_store.ping()
        except PersistenceError as exc:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "degraded", "store": "down", "message": exc.message},
            )
        return HealthResponse(status="ok", store="up")

    return app


app = create_app()


if __name__ == "__main__":
    _settings = get_settings()
    logger.info(f"🚀 Server running on http://localhost:{_settings.port}")
    uvicorn.run(app, host=_settings.host, port=_settings.port)
