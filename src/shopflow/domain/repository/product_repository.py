"""Abstract repository for the Product aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from shopflow.domain.model.catalog_names import ProductSlug
from shopflow.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: UUID) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_slug(self, slug: ProductSlug) -> Product | None:
        """Return a product by its slug, or None if not found."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
