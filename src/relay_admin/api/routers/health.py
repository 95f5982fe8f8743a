"""
relay_admin.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) with DB connectivity validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from relay_admin.api.deps import db_from_app
from relay_admin.db.session import Db

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(db: Db = Depends(db_from_app)) -> dict[str, str]:
    await db.ping()
    return {"status": "ready"}
