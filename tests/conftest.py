"""
tests.conftest

Shared fixtures: test settings with cheap bcrypt rounds, a running app, and an
httpx client bound to it in-process.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from relay_admin.api.app import create_app
from relay_admin.settings import Settings

API_TOKEN = "s3cr3t"


def make_settings(tmp_path: Path, **overrides) -> Settings:
    values = {
        "env": "test",
        "api_token": API_TOKEN,
        "bcrypt_rounds": 4,
        "verify_workers": 2,
        "json_logs": False,
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'relay.db'}",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return make_settings(tmp_path)


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
