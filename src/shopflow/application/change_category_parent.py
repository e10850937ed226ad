"""Application service: Change Category Parent use case.

The Category aggregate only knows its own parent id, so it can refuse
being its own parent but not a longer cycle. This handler walks the
ancestor chain of the new parent through the repository before letting
the aggregate move.
"""

from __future__ import annotations

import logging
from uuid import UUID

from shopflow.application.event_publisher import DomainEventPublisher, publish_pending_events
from shopflow.domain.exceptions import EntityNotFoundError, IllegalStateError, ValidationError
from shopflow.domain.model.category import Category, CategoryStatus
from shopflow.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class ChangeCategoryParentHandler:

    def __init__(self, category_repo: CategoryRepository, publisher: DomainEventPublisher) -> None:
        self._category_repo = category_repo
        self._publisher = publisher

    def handle(self, category_id: UUID, new_parent_id: UUID | None) -> Category:
        category = self._load(category_id)

        if new_parent_id not in (None, category.parent_id, category.id):
            parent = self._load(new_parent_id)
            if parent.status == CategoryStatus.DELETED:
                raise IllegalStateError(
                    f"Cannot move a category under deleted category '{parent.name}'"
                )
            self._check_not_descendant(category, parent)

        category.change_parent(new_parent_id)
        self._category_repo.save(category)
        if publish_pending_events(category, self._publisher):
            logger.info("Moved category %s under %s", category.id, new_parent_id or "root")
        return category

    # --- Internal helpers -----------------------------------------------------

    def _load(self, category_id: UUID) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError(f"Category '{category_id}' not found")
        return category

    def _check_not_descendant(self, category: Category, new_parent: Category) -> None:
        seen: set[UUID] = set()
        node: Category | None = new_parent
        while node is not None:
            if node.id == category.id:
                raise ValidationError(
                    f"Cannot move category '{category.name}' under its own descendant"
                )
            if node.id in seen:
                # Stored data already contains a cycle that excludes this category.
                break
            seen.add(node.id)
            node = self._category_repo.get_by_id(node.parent_id) if node.parent_id else None
