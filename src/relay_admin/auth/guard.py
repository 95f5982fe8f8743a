"""
relay_admin.auth.guard

Per-request admin guard (FastAPI dependency).

Responsibilities:
- Turn a request into an `Admin` capability or a typed `AuthError`.
- Run the bcrypt comparison off the event loop.

Evaluation order is fixed:
ConfigLookup -> HeaderExtract -> Verify -> StoreLookup -> Admin.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import Executor
from typing import TypeVar

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request

from relay_admin.auth.config import AdminConfig
from relay_admin.auth.errors import AuthError, AuthErrorKind
from relay_admin.auth.header import HeaderParseError, XApiToken
from relay_admin.db.session import Db
from relay_admin.observability.logging import get_logger

log = get_logger(__name__)

# Only this module holds the key, so only `require_admin` can mint an `Admin`.
_GUARD_KEY = object()

T = TypeVar("T")


class Admin:
    """
    Capability granted to a request that passed the admin guard.

    Borrows the process-wide `Db`; it does not own or close it.
    """

    __slots__ = ("_db",)

    def __init__(self, db: Db, *, _key: object = None) -> None:
        if _key is not _GUARD_KEY:
            raise TypeError("Admin can only be obtained through require_admin")
        self._db = db

    @property
    def db(self) -> Db:
        return self._db

    def __repr__(self) -> str:
        return "Admin()"


def _app_data(request: Request, name: str, expected: type[T]) -> T | None:
    value = getattr(request.app.state, name, None)
    return value if isinstance(value, expected) else None


async def _verify(request: Request, config: AdminConfig, token: XApiToken) -> bool:
    pool = _app_data(request, "verify_pool", Executor)
    if pool is None:
        return await run_in_threadpool(config.verify, token)
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(pool, config.verify, token)


async def require_admin(request: Request) -> Admin:
    config = _app_data(request, "admin_config", AdminConfig)
    if config is None:
        raise AuthError(AuthErrorKind.MISSING_CONFIG)

    try:
        token = XApiToken.from_request(request)
    except HeaderParseError as e:
        raise AuthError(AuthErrorKind.PARSE_HEADER) from e

    if not await _verify(request, config, token):
        raise AuthError(AuthErrorKind.INVALID)

    db = _app_data(request, "db", Db)
    if db is None:
        raise AuthError(AuthErrorKind.MISSING_DB)

    log.debug("admin_auth.granted")
    return Admin(db, _key=_GUARD_KEY)


# --- Module Notes -----------------------------------------------------------
# `config.verify` raises AuthError(VERIFY) itself on a bcrypt fault, which
# propagates unchanged through the executor future.
