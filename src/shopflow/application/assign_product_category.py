"""Application service: Assign / Unassign Product Category use cases."""

from __future__ import annotations

import logging
from uuid import UUID

from shopflow.application.event_publisher import DomainEventPublisher, publish_pending_events
from shopflow.domain.exceptions import EntityNotFoundError, IllegalStateError
from shopflow.domain.model.category import Category, CategoryStatus
from shopflow.domain.model.product import Product
from shopflow.domain.repository.category_repository import CategoryRepository
from shopflow.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AssignProductCategoryHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        publisher: DomainEventPublisher,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._publisher = publisher

    def handle(self, product_id: UUID, category_id: UUID) -> Product:
        """Add the product to an active (or inactive) category."""
        product, category = self._load(product_id, category_id)
        if category.status == CategoryStatus.DELETED:
            raise IllegalStateError(
                f"Cannot add a product to deleted category '{category.name}'"
            )

        product.add_category(category)
        self._save(product)
        return product

    def unassign(self, product_id: UUID, category_id: UUID) -> Product:
        """Remove the product from a category. Deleted categories are allowed."""
        product, category = self._load(product_id, category_id)
        product.remove_category(category)
        self._save(product)
        return product

    # --- Internal helpers -----------------------------------------------------

    def _load(self, product_id: UUID, category_id: UUID) -> tuple[Product, Category]:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product '{product_id}' not found")
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError(f"Category '{category_id}' not found")
        return product, category

    def _save(self, product: Product) -> None:
        self._product_repo.save(product)
        count = publish_pending_events(product, self._publisher)
        if count:
            logger.info("Product %s category count is now %d", product.id, len(product.category_ids))
