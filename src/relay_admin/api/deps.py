"""
relay_admin.api.deps

FastAPI dependency wiring for unauthenticated API routes.

Responsibilities:
- Provide the shared `Db` handle to health probes.
"""

from __future__ import annotations

from fastapi import HTTPException, Request
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from relay_admin.db.session import Db


def db_from_app(request: Request) -> Db:
    # Created on app startup in `relay_admin.api.app.create_app`.
    db = getattr(request.app.state, "db", None)
    if not isinstance(db, Db):
        raise HTTPException(status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="Database not ready")
    return db


# --- Module Notes -----------------------------------------------------------
# Admin routes must not use `db_from_app`; they reach the store through
# `auth.guard.Admin.db` so that access always passes the guard.
