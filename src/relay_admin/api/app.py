"""
relay_admin.api.app

FastAPI app factory for the relay administration service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Hash the administrator secret once, before the app can serve requests.
- Initialize and dispose shared infrastructure (Db handle, verification pool).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from relay_admin import __version__
from relay_admin.api.routers.admin import router as admin_router
from relay_admin.api.routers.health import router as health_router
from relay_admin.auth.config import AdminConfig
from relay_admin.auth.errors import AuthError, auth_error_handler
from relay_admin.db.init_db import init_db
from relay_admin.db.session import Db
from relay_admin.observability.logging import configure_logging, get_logger
from relay_admin.observability.middleware import RequestContextMiddleware
from relay_admin.settings import Settings

log = get_logger(__name__)


def build_admin_config(settings: Settings) -> AdminConfig | None:
    if settings.api_token is None:
        log.warning("admin_config.disabled", reason="RELAY_API_TOKEN is not set")
        return None
    # AuthError(HASH) propagates: the process must not start without a usable credential.
    return AdminConfig.build(settings.api_token.get_secret_value(), rounds=settings.bcrypt_rounds)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.json_logs,
    )

    admin_config = build_admin_config(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, admin_enabled=admin_config is not None)
        db = Db.from_settings(settings)
        if settings.env in ("dev", "test"):
            await init_db(db)
        app.state.db = db
        app.state.verify_pool = ThreadPoolExecutor(
            max_workers=settings.verify_workers,
            thread_name_prefix="admin-verify",
        )
        try:
            yield
        finally:
            # Drain in-flight verifications without blocking the event loop.
            await run_in_threadpool(app.state.verify_pool.shutdown, wait=True)
            await db.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Relay Admin",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    if admin_config is not None:
        app.state.admin_config = admin_config

    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(AuthError, auth_error_handler)  # type: ignore[arg-type]
    app.include_router(health_router, tags=["health"])
    app.include_router(admin_router)

    return app


# --- Module Notes -----------------------------------------------------------
# `app.state` is the only registry for process-wide values; the guard looks up
# `admin_config`, `db` and `verify_pool` there by type.
