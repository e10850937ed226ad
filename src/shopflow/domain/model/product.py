"""Product aggregate.

Products live independently of orders and categories. They have their
own lifecycle::

    DRAFT → ACTIVE ⇄ INACTIVE
    any   → DISCONTINUED          (cannot be activated directly)
    any   → INACTIVE

DISCONTINUED is only terminal for ``activate()``. ``deactivate()`` is
accepted from every status, so ``discontinue → deactivate → activate``
brings a product back on sale.

Category membership is a set of category ids; the product never holds
the Category aggregates themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from shopflow.domain.events import (
    ProductCategoryAdded,
    ProductCategoryRemoved,
    ProductCreated,
    ProductReturnDaysChanged,
    ProductSkuAdded,
    ProductStatusChanged,
)
from shopflow.domain.exceptions import (
    IllegalStateError,
    NullArgumentError,
    ValidationError,
)
from shopflow.domain.model.aggregate import AggregateRoot, utc_now
from shopflow.domain.model.catalog_names import ProductName, ProductSlug

if TYPE_CHECKING:
    from shopflow.domain.model.category import Category

MAX_PRODUCT_TYPE = 255


class ProductStatus(IntEnum):
    DRAFT = 1
    ACTIVE = 2
    INACTIVE = 3
    DISCONTINUED = 4


@dataclass
class Sku:
    """A sellable variant of a product, owned by the Product aggregate."""

    code: str
    is_active: bool = True
    weight_grams: int | None = None
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if self.code is None or not self.code.strip():
            raise ValidationError("SKU code cannot be empty")
        if self.weight_grams is not None and self.weight_grams < 0:
            raise ValidationError("SKU weight cannot be negative")
        self.code = self.code.strip().upper()


@dataclass(eq=False)
class Product(AggregateRoot):
    """Aggregate root for catalog products.

    Use ``Product.create()`` for new products; ``__init__`` rehydrates
    stored state as-is.
    """

    id: UUID
    name: ProductName
    slug: ProductSlug
    product_type: int
    status: ProductStatus = ProductStatus.DRAFT
    return_days: int | None = None
    skus: list[Sku] = field(default_factory=list)
    category_ids: set[UUID] = field(default_factory=set)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: ProductName,
        product_type: int,
        slug: ProductSlug | None = None,
        return_days: int | None = None,
        product_id: UUID | None = None,
    ) -> Product:
        """Create a draft product. The slug defaults to one derived from *name*."""
        if name is None:
            raise NullArgumentError("name")
        if product_type is None:
            raise NullArgumentError("product_type")
        if not 0 <= product_type <= MAX_PRODUCT_TYPE:
            raise ValidationError(
                f"Product type must be between 0 and {MAX_PRODUCT_TYPE}"
            )
        _check_return_days(return_days)

        now = utc_now()
        product = Product(
            id=product_id or uuid4(),
            name=name,
            slug=slug or ProductSlug.from_product_name(name),
            product_type=product_type,
            return_days=return_days,
            created_at=now,
            updated_at=now,
        )
        product._record(
            ProductCreated(
                aggregate_id=product.id,
                name=product.name.value,
                slug=product.slug.value,
                product_type=product_type,
            )
        )
        return product

    # --- State transitions ----------------------------------------------------

    def activate(self) -> None:
        if self.status == ProductStatus.DISCONTINUED:
            raise IllegalStateError("Cannot activate a discontinued product")
        self._change_status(ProductStatus.ACTIVE)

    def deactivate(self) -> None:
        self._change_status(ProductStatus.INACTIVE)

    def discontinue(self) -> None:
        self._change_status(ProductStatus.DISCONTINUED)

    # --- Updates --------------------------------------------------------------

    def update_return_days(self, return_days: int | None) -> None:
        _check_return_days(return_days)
        if return_days == self.return_days:
            return
        old = self.return_days
        self.return_days = return_days
        self._touch()
        self._record(
            ProductReturnDaysChanged(
                aggregate_id=self.id, old_return_days=old, new_return_days=return_days
            )
        )

    def add_sku(self, sku: Sku) -> None:
        if sku is None:
            raise NullArgumentError("sku")
        if any(existing.code == sku.code for existing in self.skus):
            raise ValidationError(f"SKU '{sku.code}' already exists on this product")
        self.skus.append(sku)
        self._touch()
        self._record(ProductSkuAdded(aggregate_id=self.id, sku_id=sku.id, sku_code=sku.code))

    def add_category(self, category: Category) -> None:
        """Add the product to *category*. Adding twice is a no-op."""
        if category is None:
            raise NullArgumentError("category")
        if category.id in self.category_ids:
            return
        self.category_ids.add(category.id)
        self._touch()
        self._record(ProductCategoryAdded(aggregate_id=self.id, category_id=category.id))

    def remove_category(self, category: Category) -> None:
        """Remove the product from *category*. Removing a non-member is a no-op."""
        if category is None:
            raise NullArgumentError("category")
        if category.id not in self.category_ids:
            return
        self.category_ids.discard(category.id)
        self._touch()
        self._record(ProductCategoryRemoved(aggregate_id=self.id, category_id=category.id))

    # --- Queries --------------------------------------------------------------

    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE

    def can_be_ordered(self) -> bool:
        return self.is_active() and any(sku.is_active for sku in self.skus)

    # --- Internal helpers -----------------------------------------------------

    def _change_status(self, new_status: ProductStatus) -> None:
        if self.status == new_status:
            return
        old_status = self.status
        self.status = new_status
        self._touch()
        self._record(
            ProductStatusChanged(
                aggregate_id=self.id,
                old_status=old_status.value,
                new_status=new_status.value,
            )
        )


def _check_return_days(return_days: int | None) -> None:
    if return_days is not None and return_days < 0:
        raise ValidationError("Return days cannot be negative")
