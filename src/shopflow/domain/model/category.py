"""Category aggregate: the nodes of the catalog tree.

The parent link is stored as an id only. Categories can be reparented at
runtime, and resolving ``parent_id`` (or checking that a reparent does
not create a cycle) goes through ``CategoryRepository`` in the
application layer.

Status transitions are idempotent: requesting the current status changes
nothing and records no event.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from uuid import UUID, uuid4

from shopflow.domain.events import (
    CategoryCreated,
    CategoryDeleted,
    CategoryParentChanged,
    CategorySlugChanged,
    CategoryStatusChanged,
    CategoryUpdated,
)
from shopflow.domain.exceptions import NullArgumentError, ValidationError
from shopflow.domain.model.aggregate import AggregateRoot, utc_now
from shopflow.domain.model.catalog_names import CategoryName, CategorySlug


class CategoryStatus(IntEnum):
    ACTIVE = 1
    INACTIVE = 2
    DELETED = 3


@dataclass(eq=False)
class Category(AggregateRoot):
    id: UUID
    name: CategoryName
    slug: CategorySlug
    description: str | None = None
    parent_id: UUID | None = None
    sort_order: int = 0
    status: CategoryStatus = CategoryStatus.ACTIVE
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    # --- Factory (used for NEW categories only) -------------------------------

    @staticmethod
    def create(
        name: CategoryName,
        slug: CategorySlug | None = None,
        description: str | None = None,
        parent_id: UUID | None = None,
        sort_order: int = 0,
        category_id: UUID | None = None,
    ) -> Category:
        if name is None:
            raise NullArgumentError("name")

        now = utc_now()
        category = Category(
            id=category_id or uuid4(),
            name=name,
            slug=slug or CategorySlug.from_category_name(name),
            description=description,
            parent_id=parent_id,
            sort_order=sort_order,
            created_at=now,
            updated_at=now,
        )
        if parent_id is not None and parent_id == category.id:
            raise ValidationError("A category cannot be its own parent")
        category._record(
            CategoryCreated(
                aggregate_id=category.id,
                name=category.name.value,
                slug=category.slug.value,
                parent_id=parent_id,
            )
        )
        return category

    # --- State transitions ----------------------------------------------------

    def activate(self) -> None:
        self._change_status(CategoryStatus.ACTIVE)

    def deactivate(self) -> None:
        self._change_status(CategoryStatus.INACTIVE)

    def delete(self) -> None:
        """Soft-delete. Records ``CategoryDeleted`` instead of a status change."""
        if self.status == CategoryStatus.DELETED:
            return
        self.status = CategoryStatus.DELETED
        self._touch()
        self._record(CategoryDeleted(aggregate_id=self.id, category_name=self.name.value))

    # --- Updates --------------------------------------------------------------

    def update_name(self, name: CategoryName) -> None:
        if name is None:
            raise NullArgumentError("name")
        # Names compare case-insensitively; a case-only edit is still a change.
        if name.value == self.name.value:
            return
        old_name = self.name
        self.name = name
        self._touch()
        self._record(
            CategoryUpdated(aggregate_id=self.id, old_name=old_name.value, new_name=name.value)
        )

    def update_slug(self, slug: CategorySlug) -> None:
        if slug is None:
            raise NullArgumentError("slug")
        if slug == self.slug:
            return
        old_slug = self.slug
        self.slug = slug
        self._touch()
        self._record(
            CategorySlugChanged(aggregate_id=self.id, old_slug=old_slug.value, new_slug=slug.value)
        )

    def update_description(self, description: str | None) -> None:
        if description == self.description:
            return
        self.description = description
        self._touch()

    def update_sort_order(self, sort_order: int) -> None:
        if sort_order is None:
            raise NullArgumentError("sort_order")
        if sort_order == self.sort_order:
            return
        self.sort_order = sort_order
        self._touch()

    def change_parent(self, parent_id: UUID | None) -> None:
        """Move the category under *parent_id*, or to the root with ``None``."""
        if parent_id == self.parent_id:
            return
        if parent_id is not None and parent_id == self.id:
            raise ValidationError("A category cannot be its own parent")
        old_parent_id = self.parent_id
        self.parent_id = parent_id
        self._touch()
        self._record(
            CategoryParentChanged(
                aggregate_id=self.id,
                old_parent_id=old_parent_id,
                new_parent_id=parent_id,
            )
        )

    # --- Queries --------------------------------------------------------------

    def is_active(self) -> bool:
        return self.status == CategoryStatus.ACTIVE

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    # --- Internal helpers -----------------------------------------------------

    def _change_status(self, new_status: CategoryStatus) -> None:
        if self.status == new_status:
            return
        old_status = self.status
        self.status = new_status
        self._touch()
        self._record(
            CategoryStatusChanged(
                aggregate_id=self.id,
                old_status=old_status.value,
                new_status=new_status.value,
            )
        )
