"""
relay_admin.clients.admin_http

HTTP client for the relay admin API.

Responsibilities:
- Attach the `X-Api-Token` header to every call.
- Wrap the allow/block endpoints behind typed async methods.
- Surface the server's `{"msg": ...}` body on failures.
"""

from __future__ import annotations

import httpx

from relay_admin.auth.header import XApiToken

ADMIN_PREFIX = "/api/v1/admin"


class AdminClientError(Exception):
    def __init__(self, status_code: int, msg: str) -> None:
        self.status_code = status_code
        self.msg = msg
        super().__init__(f"{status_code}: {msg}")


class AdminClient:
    """
    Thin client over an `httpx.AsyncClient` whose base_url points at the relay.
    """

    def __init__(self, *, http: httpx.AsyncClient, api_token: str) -> None:
        self._http = http
        # Validated once here; raises InvalidHeaderValue for unsendable tokens.
        name, value = XApiToken(api_token).header()
        self._headers = {name: value}

    async def _request(
        self, method: str, path: str, *, domains: list[str] | None = None
    ) -> list[str]:
        r = await self._http.request(
            method,
            f"{ADMIN_PREFIX}{path}",
            headers=self._headers,
            json={"domains": domains} if domains is not None else None,
        )
        if r.is_error:
            try:
                msg = str(r.json().get("msg", r.text))
            except ValueError:
                msg = r.text
            raise AdminClientError(r.status_code, msg)
        return list(r.json()["domains"])

    async def allow(self, domains: list[str]) -> list[str]:
        return await self._request("POST", "/allow", domains=domains)

    async def disallow(self, domains: list[str]) -> list[str]:
        return await self._request("POST", "/disallow", domains=domains)

    async def block(self, domains: list[str]) -> list[str]:
        return await self._request("POST", "/block", domains=domains)

    async def unblock(self, domains: list[str]) -> list[str]:
        return await self._request("POST", "/unblock", domains=domains)

    async def allowed(self) -> list[str]:
        return await self._request("GET", "/allowed")

    async def blocked(self) -> list[str]:
        return await self._request("GET", "/blocked")


# --- Module Notes -----------------------------------------------------------
# Callers own the `httpx.AsyncClient` (timeouts, transport, base_url).
