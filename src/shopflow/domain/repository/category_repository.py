"""Abstract repository for the Category aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from shopflow.domain.model.catalog_names import CategorySlug
from shopflow.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: UUID) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def get_by_slug(self, slug: CategorySlug) -> Category | None:
        """Return a category by its slug, or None if not found."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """Persist a new or updated category."""
