"""
relay_admin.db.models

Persistence schema for the relay's domain policy.

Responsibilities:
- DomainRule: one allow-list or block-list entry per (domain, kind).
"""

from __future__ import annotations

import enum
from datetime import UTC, datetime

from sqlalchemy import Enum, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from relay_admin.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(tz=UTC).replace(tzinfo=None)


class DomainRuleKind(enum.StrEnum):
    allowed = "ALLOWED"
    blocked = "BLOCKED"


class DomainRule(Base):
    __tablename__ = "domain_rules"
    __table_args__ = (UniqueConstraint("domain", "kind", name="uq_domain_rules_domain_kind"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    domain: Mapped[str] = mapped_column(String(253), nullable=False, index=True)
    kind: Mapped[DomainRuleKind] = mapped_column(Enum(DomainRuleKind), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
