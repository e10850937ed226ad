"""Application service: Register User use case."""

from __future__ import annotations

import logging

from shopflow.application.event_publisher import DomainEventPublisher, publish_pending_events
from shopflow.domain.exceptions import ValidationError
from shopflow.domain.model.user import RoleCode, User
from shopflow.domain.model.value_objects import Email, PhoneNumber
from shopflow.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository, publisher: DomainEventPublisher) -> None:
        self._user_repo = user_repo
        self._publisher = publisher

    def handle(self, email: str, password_hash: str, phone: str | None = None) -> User:
        """Register a customer account. Emails are unique across users."""
        address = Email(email)
        if self._user_repo.get_by_email(address) is not None:
            raise ValidationError(f"Email '{address}' is already registered")

        user = User.create(
            email=address,
            password_hash=password_hash,
            phone=PhoneNumber(phone) if phone else None,
        )
        user.assign_role(RoleCode.CUSTOMER)
        self._user_repo.save(user)
        publish_pending_events(user, self._publisher)

        logger.info("Registered user %s", user.id)
        return user
