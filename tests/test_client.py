"""
tests.test_client

`AdminClient` against the in-process app.
"""

from __future__ import annotations

import httpx
import pytest

from relay_admin.auth.header import InvalidHeaderValue
from relay_admin.clients.admin_http import AdminClient, AdminClientError
from tests.conftest import API_TOKEN


@pytest.mark.asyncio
async def test_client_manages_block_list(client: httpx.AsyncClient) -> None:
    admin = AdminClient(http=client, api_token=API_TOKEN)

    assert await admin.block(["bad.example", "worse.example"]) == ["bad.example", "worse.example"]
    assert await admin.unblock(["bad.example"]) == ["worse.example"]
    assert await admin.blocked() == ["worse.example"]


@pytest.mark.asyncio
async def test_client_manages_allow_list(client: httpx.AsyncClient) -> None:
    admin = AdminClient(http=client, api_token=API_TOKEN)

    assert await admin.allow(["good.example"]) == ["good.example"]
    assert await admin.allowed() == ["good.example"]
    assert await admin.disallow(["good.example"]) == []


@pytest.mark.asyncio
async def test_client_surfaces_server_message(client: httpx.AsyncClient) -> None:
    admin = AdminClient(http=client, api_token="wrong")
    with pytest.raises(AdminClientError) as info:
        await admin.blocked()
    assert info.value.status_code == 400
    assert info.value.msg == "Invalid API Token"


def test_client_rejects_unsendable_token() -> None:
    with pytest.raises(InvalidHeaderValue):
        AdminClient(http=httpx.AsyncClient(), api_token="bad\ntoken")
