"""User aggregate: marketplace accounts and their lifecycle.

Status transitions::

    ACTIVE ⇄ INACTIVE ⇄ SUSPENDED      (activate / deactivate / suspend)
    any    → BANNED                    (ban, terminal)

A banned account can only be restored by an administrative path outside
the domain model. Addresses and roles are referenced by id/code, never
embedded, so the user never owns another aggregate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from uuid import UUID, uuid4

from shopflow.domain.events import (
    UserAddressAdded,
    UserCreated,
    UserEmailChanged,
    UserEmailVerified,
    UserPasswordChanged,
    UserPhoneChanged,
    UserRoleAssigned,
    UserRoleRevoked,
    UserStatusChanged,
)
from shopflow.domain.exceptions import (
    IllegalStateError,
    NullArgumentError,
    ValidationError,
)
from shopflow.domain.model.aggregate import AggregateRoot, utc_now
from shopflow.domain.model.value_objects import Email, PhoneNumber


class UserStatus(IntEnum):
    ACTIVE = 1
    INACTIVE = 2
    SUSPENDED = 3
    BANNED = 4


class RoleCode(str, Enum):
    ADMIN = "ADMIN"
    MODERATOR = "MODERATOR"
    CUSTOMER = "CUSTOMER"
    VENDOR_STAFF = "VENDOR_STAFF"
    WAREHOUSE_STAFF = "WAREHOUSE_STAFF"
    GUEST = "GUEST"

    @classmethod
    def parse(cls, code: str | RoleCode) -> RoleCode:
        if code is None:
            raise NullArgumentError("role_code")
        if isinstance(code, RoleCode):
            return code
        try:
            return cls(code.strip().upper())
        except ValueError as exc:
            raise ValidationError(f"Unknown role code: {code!r}") from exc


@dataclass(eq=False)
class User(AggregateRoot):
    """Aggregate root for marketplace accounts.

    Use ``User.create()`` for new accounts. The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    users without re-validating.
    """

    id: UUID
    email: Email
    password_hash: str
    phone: PhoneNumber | None = None
    status: UserStatus = UserStatus.ACTIVE
    email_verified: bool = False
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    address_ids: set[UUID] = field(default_factory=set)
    role_codes: set[RoleCode] = field(default_factory=set)

    # --- Factory (used for NEW users only) ------------------------------------

    @staticmethod
    def create(
        email: Email,
        password_hash: str,
        phone: PhoneNumber | None = None,
        user_id: UUID | None = None,
    ) -> User:
        if email is None:
            raise NullArgumentError("email")
        _require_password_hash(password_hash)

        now = utc_now()
        user = User(
            id=user_id or uuid4(),
            email=email,
            password_hash=password_hash,
            phone=phone,
            created_at=now,
            updated_at=now,
        )
        user._record(UserCreated(aggregate_id=user.id, email=email.value))
        return user

    # --- State transitions ----------------------------------------------------

    def activate(self) -> None:
        if self.status == UserStatus.BANNED:
            raise IllegalStateError("Cannot activate a banned user")
        self._change_status(UserStatus.ACTIVE)

    def deactivate(self) -> None:
        if self.status == UserStatus.BANNED:
            raise IllegalStateError("Cannot deactivate a banned user")
        self._change_status(UserStatus.INACTIVE)

    def suspend(self) -> None:
        if self.status == UserStatus.BANNED:
            raise IllegalStateError("Cannot suspend a banned user")
        self._change_status(UserStatus.SUSPENDED)

    def ban(self) -> None:
        """Ban the account. Allowed from every status; there is no way back."""
        self._change_status(UserStatus.BANNED)

    # --- Profile updates ------------------------------------------------------

    def update_email(self, new_email: Email) -> None:
        """Replace the email address. Verification is always reset."""
        if new_email is None:
            raise NullArgumentError("new_email")
        if new_email == self.email and not self.email_verified:
            return

        old_email = self.email
        self.email = new_email
        self.email_verified = False
        self._touch()
        self._record(
            UserEmailChanged(
                aggregate_id=self.id,
                old_email=old_email.value,
                new_email=new_email.value,
            )
        )

    def verify_email(self) -> None:
        if self.email_verified:
            return
        self.email_verified = True
        self._touch()
        self._record(UserEmailVerified(aggregate_id=self.id, email=self.email.value))

    def change_password(self, new_password_hash: str) -> None:
        _require_password_hash(new_password_hash)
        if new_password_hash == self.password_hash:
            return
        self.password_hash = new_password_hash
        self._touch()
        self._record(UserPasswordChanged(aggregate_id=self.id))

    def update_phone(self, new_phone: PhoneNumber | None) -> None:
        """Replace or clear (``None``) the phone number."""
        if new_phone == self.phone:
            return
        old_phone = self.phone
        self.phone = new_phone
        self._touch()
        self._record(
            UserPhoneChanged(
                aggregate_id=self.id,
                old_phone=old_phone.value if old_phone else None,
                new_phone=new_phone.value if new_phone else None,
            )
        )

    # --- Owned references -----------------------------------------------------

    def add_address(self, address_id: UUID) -> None:
        if address_id is None:
            raise NullArgumentError("address_id")
        if address_id in self.address_ids:
            return
        self.address_ids.add(address_id)
        self._touch()
        self._record(UserAddressAdded(aggregate_id=self.id, address_id=address_id))

    def assign_role(self, role_code: str | RoleCode) -> None:
        role = RoleCode.parse(role_code)
        if role in self.role_codes:
            return
        self.role_codes.add(role)
        self._touch()
        self._record(UserRoleAssigned(aggregate_id=self.id, role_code=role.value))

    def revoke_role(self, role_code: str | RoleCode) -> None:
        role = RoleCode.parse(role_code)
        if role not in self.role_codes:
            return
        self.role_codes.discard(role)
        self._touch()
        self._record(UserRoleRevoked(aggregate_id=self.id, role_code=role.value))

    # --- Queries --------------------------------------------------------------

    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    def has_role(self, role_code: str | RoleCode) -> bool:
        try:
            return RoleCode.parse(role_code) in self.role_codes
        except ValidationError:
            return False

    # --- Internal helpers -----------------------------------------------------

    def _change_status(self, new_status: UserStatus) -> None:
        if self.status == new_status:
            return
        old_status = self.status
        self.status = new_status
        self._touch()
        self._record(
            UserStatusChanged(
                aggregate_id=self.id,
                old_status=old_status.value,
                new_status=new_status.value,
            )
        )


def _require_password_hash(password_hash: str | None) -> None:
    if password_hash is None or not password_hash.strip():
        raise ValidationError("Password hash cannot be empty")
