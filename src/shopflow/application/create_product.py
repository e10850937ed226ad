"""Application service: Create Product use case."""

from __future__ import annotations

import logging

from shopflow.application.event_publisher import DomainEventPublisher, publish_pending_events
from shopflow.domain.exceptions import ValidationError
from shopflow.domain.model.catalog_names import ProductName, ProductSlug
from shopflow.domain.model.product import Product
from shopflow.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository, publisher: DomainEventPublisher) -> None:
        self._product_repo = product_repo
        self._publisher = publisher

    def handle(
        self,
        name: str,
        product_type: int,
        slug: str | None = None,
        return_days: int | None = None,
    ) -> Product:
        """Create a draft product. Slugs are unique across products."""
        product_name = ProductName.from_display_name(name)
        product_slug = ProductSlug(slug) if slug else ProductSlug.from_product_name(product_name)
        if self._product_repo.get_by_slug(product_slug) is not None:
            raise ValidationError(f"Product slug '{product_slug}' is already in use")

        product = Product.create(
            name=product_name,
            product_type=product_type,
            slug=product_slug,
            return_days=return_days,
        )
        self._product_repo.save(product)
        publish_pending_events(product, self._publisher)

        logger.info("Created product %s (%s)", product.id, product_slug)
        return product
