"""Domain events recorded by aggregates.

Events are immutable records of something that already happened to an
aggregate. Aggregates append them to their pending list during a
mutation; an application-level publisher drains that list once the
aggregate has been persisted. Every event carries the id of the
aggregate it belongs to plus the attributes that changed.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    aggregate_id: UUID
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def payload(self) -> dict[str, Any]:
        """Event-specific attributes, without the envelope fields."""
        data = asdict(self)
        for key in ("aggregate_id", "event_id", "occurred_at"):
            data.pop(key)
        return data


# ── User ─────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, kw_only=True)
class UserCreated(DomainEvent):
    email: str


@dataclass(frozen=True, kw_only=True)
class UserStatusChanged(DomainEvent):
    old_status: int
    new_status: int


@dataclass(frozen=True, kw_only=True)
class UserEmailChanged(DomainEvent):
    old_email: str
    new_email: str


@dataclass(frozen=True, kw_only=True)
class UserEmailVerified(DomainEvent):
    email: str


@dataclass(frozen=True, kw_only=True)
class UserPasswordChanged(DomainEvent):
    pass


@dataclass(frozen=True, kw_only=True)
class UserPhoneChanged(DomainEvent):
    old_phone: str | None
    new_phone: str | None


@dataclass(frozen=True, kw_only=True)
class UserAddressAdded(DomainEvent):
    address_id: UUID


@dataclass(frozen=True, kw_only=True)
class UserRoleAssigned(DomainEvent):
    role_code: str


@dataclass(frozen=True, kw_only=True)
class UserRoleRevoked(DomainEvent):
    role_code: str


# ── Product ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, kw_only=True)
class ProductCreated(DomainEvent):
    name: str
    slug: str
    product_type: int


@dataclass(frozen=True, kw_only=True)
class ProductStatusChanged(DomainEvent):
    old_status: int
    new_status: int


@dataclass(frozen=True, kw_only=True)
class ProductReturnDaysChanged(DomainEvent):
    old_return_days: int | None
    new_return_days: int | None


@dataclass(frozen=True, kw_only=True)
class ProductSkuAdded(DomainEvent):
    sku_id: UUID
    sku_code: str


@dataclass(frozen=True, kw_only=True)
class ProductCategoryAdded(DomainEvent):
    category_id: UUID


@dataclass(frozen=True, kw_only=True)
class ProductCategoryRemoved(DomainEvent):
    category_id: UUID


# ── Category ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, kw_only=True)
class CategoryCreated(DomainEvent):
    name: str
    slug: str
    parent_id: UUID | None


@dataclass(frozen=True, kw_only=True)
class CategoryUpdated(DomainEvent):
    old_name: str
    new_name: str


@dataclass(frozen=True, kw_only=True)
class CategorySlugChanged(DomainEvent):
    old_slug: str
    new_slug: str


@dataclass(frozen=True, kw_only=True)
class CategoryStatusChanged(DomainEvent):
    old_status: int
    new_status: int


@dataclass(frozen=True, kw_only=True)
class CategoryDeleted(DomainEvent):
    category_name: str


@dataclass(frozen=True, kw_only=True)
class CategoryParentChanged(DomainEvent):
    old_parent_id: UUID | None
    new_parent_id: UUID | None
