"""
relay_admin.api.routers.admin

Administrative endpoints for the relay's domain policy.

Responsibilities:
- Manage the allow-list and block-list of federated domains.
- Require the `Admin` capability on every route.
"""

from __future__ import annotations

import json

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field, ValidationError

from relay_admin.auth.guard import Admin, require_admin
from relay_admin.db.models import DomainRuleKind
from relay_admin.db.repositories.domains import DomainRepo
from relay_admin.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


class DomainsRequest(BaseModel):
    domains: list[str] = Field(min_length=1, max_length=1000)


class DomainsResponse(BaseModel):
    domains: list[str]


async def domains_body(
    request: Request, _admin: Admin = Depends(require_admin)
) -> DomainsRequest:
    # Depends on the guard so unauthenticated bodies are never parsed.
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": {}}]
        ) from e
    try:
        return DomainsRequest.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e


async def _add(admin: Admin, kind: DomainRuleKind, domains: list[str]) -> DomainsResponse:
    async with admin.db.session() as session:
        repo = DomainRepo(session)
        await repo.add(kind=kind, domains=domains)
        current = await repo.list_for_kind(kind)
    log.info("domains.added", kind=kind.value, count=len(domains))
    return DomainsResponse(domains=current)


async def _remove(admin: Admin, kind: DomainRuleKind, domains: list[str]) -> DomainsResponse:
    async with admin.db.session() as session:
        repo = DomainRepo(session)
        await repo.remove(kind=kind, domains=domains)
        current = await repo.list_for_kind(kind)
    log.info("domains.removed", kind=kind.value, count=len(domains))
    return DomainsResponse(domains=current)


async def _list(admin: Admin, kind: DomainRuleKind) -> DomainsResponse:
    async with admin.db.session() as session:
        return DomainsResponse(domains=await DomainRepo(session).list_for_kind(kind))


@router.post("/allow", response_model=DomainsResponse)
async def allow(
    body: DomainsRequest = Depends(domains_body), admin: Admin = Depends(require_admin)
) -> DomainsResponse:
    return await _add(admin, DomainRuleKind.allowed, body.domains)


@router.post("/disallow", response_model=DomainsResponse)
async def disallow(
    body: DomainsRequest = Depends(domains_body), admin: Admin = Depends(require_admin)
) -> DomainsResponse:
    return await _remove(admin, DomainRuleKind.allowed, body.domains)


@router.post("/block", response_model=DomainsResponse)
async def block(
    body: DomainsRequest = Depends(domains_body), admin: Admin = Depends(require_admin)
) -> DomainsResponse:
    return await _add(admin, DomainRuleKind.blocked, body.domains)


@router.post("/unblock", response_model=DomainsResponse)
async def unblock(
    body: DomainsRequest = Depends(domains_body), admin: Admin = Depends(require_admin)
) -> DomainsResponse:
    return await _remove(admin, DomainRuleKind.blocked, body.domains)


@router.get("/allowed", response_model=DomainsResponse)
async def allowed(admin: Admin = Depends(require_admin)) -> DomainsResponse:
    return await _list(admin, DomainRuleKind.allowed)


@router.get("/blocked", response_model=DomainsResponse)
async def blocked(admin: Admin = Depends(require_admin)) -> DomainsResponse:
    return await _list(admin, DomainRuleKind.blocked)


# --- Module Notes -----------------------------------------------------------
# Domains are normalized by `DomainRepo`; every response echoes the full
# current list of the affected kind.
