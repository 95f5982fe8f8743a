"""
relay_admin.db.repositories.domains

Repository for `DomainRule` entities.

Responsibilities:
- Add and remove allow/block entries idempotently.
- List the current entries of one kind.
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from relay_admin.db.models import DomainRule, DomainRuleKind


def normalize_domain(domain: str) -> str:
    return domain.strip().lower().rstrip(".")


# Dialects with INSERT .. ON CONFLICT DO NOTHING.
_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class DomainRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, *, kind: DomainRuleKind, domains: Iterable[str]) -> None:
        wanted = {normalize_domain(d) for d in domains} - {""}
        if not wanted:
            return
        # Concurrent adds of the same domain must not trip uq_domain_rules_domain_kind.
        insert = _UPSERT_INSERTS.get(self._session.bind.dialect.name)
        if insert is not None:
            stmt = (
                insert(DomainRule)
                .values([{"domain": d, "kind": kind} for d in sorted(wanted)])
                .on_conflict_do_nothing(index_elements=["domain", "kind"])
            )
            await self._session.execute(stmt)
            return

        for domain in sorted(wanted):
            try:
                async with self._session.begin_nested():
                    self._session.add(DomainRule(domain=domain, kind=kind))
            except IntegrityError:
                continue

    async def remove(self, *, kind: DomainRuleKind, domains: Iterable[str]) -> None:
        targets = {normalize_domain(d) for d in domains} - {""}
        if not targets:
            return
        await self._session.execute(
            delete(DomainRule).where(DomainRule.kind == kind, DomainRule.domain.in_(targets))
        )

    async def list_for_kind(self, kind: DomainRuleKind) -> list[str]:
        stmt = select(DomainRule.domain).where(DomainRule.kind == kind).order_by(DomainRule.domain)
        return list((await self._session.execute(stmt)).scalars().all())
