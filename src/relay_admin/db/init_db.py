"""
relay_admin.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create tables for local development and tests.
"""

from __future__ import annotations

from relay_admin.db import models  # noqa: F401  # ensure models are registered on Base.metadata
from relay_admin.db.base import Base
from relay_admin.db.session import Db


async def init_db(db: Db) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    """

    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
