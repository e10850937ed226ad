"""Application service: Create Category use case.

Slugs are the catalog's public URLs, so a new category may not reuse one
that already exists. A parent, when given, must exist and not be deleted.
"""

from __future__ import annotations

import logging
from uuid import UUID

from shopflow.application.event_publisher import DomainEventPublisher, publish_pending_events
from shopflow.domain.exceptions import EntityNotFoundError, IllegalStateError, ValidationError
from shopflow.domain.model.catalog_names import CategoryName, CategorySlug
from shopflow.domain.model.category import Category, CategoryStatus
from shopflow.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class CreateCategoryHandler:

    def __init__(self, category_repo: CategoryRepository, publisher: DomainEventPublisher) -> None:
        self._category_repo = category_repo
        self._publisher = publisher

    def handle(
        self,
        name: str,
        slug: str | None = None,
        parent_id: UUID | None = None,
        description: str | None = None,
        sort_order: int = 0,
    ) -> Category:
        category_name = CategoryName.from_display_name(name)
        category_slug = CategorySlug(slug) if slug else CategorySlug.from_category_name(category_name)
        if self._category_repo.get_by_slug(category_slug) is not None:
            raise ValidationError(f"Category slug '{category_slug}' is already in use")

        if parent_id is not None:
            parent = self._category_repo.get_by_id(parent_id)
            if parent is None:
                raise EntityNotFoundError(f"Category '{parent_id}' not found")
            if parent.status == CategoryStatus.DELETED:
                raise IllegalStateError(
                    f"Cannot create a category under deleted category '{parent.name}'"
                )

        category = Category.create(
            name=category_name,
            slug=category_slug,
            description=description,
            parent_id=parent_id,
            sort_order=sort_order,
        )
        self._category_repo.save(category)
        publish_pending_events(category, self._publisher)

        logger.info("Created category %s (%s)", category.id, category_slug)
        return category
