"""Abstract repository for the User aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live outside this package.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from shopflow.domain.model.user import User
from shopflow.domain.model.value_objects import Email


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: UUID) -> User | None:
        """Return a user by its ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: Email) -> User | None:
        """Return the user registered under *email*, or None."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""
