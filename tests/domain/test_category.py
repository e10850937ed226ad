"""Unit tests for the Category aggregate."""

from uuid import uuid4

import pytest

from shopflow.domain.events import (
    CategoryCreated,
    CategoryDeleted,
    CategoryParentChanged,
    CategorySlugChanged,
    CategoryStatusChanged,
    CategoryUpdated,
)
from shopflow.domain.exceptions import NullArgumentError, ValidationError
from shopflow.domain.model.catalog_names import CategoryName, CategorySlug
from shopflow.domain.model.category import Category, CategoryStatus


def _make_category(name: str = "Áo Dài Truyền Thống", **kwargs) -> Category:
    """Helper: an active category with its creation event cleared."""
    category = Category.create(CategoryName(name), **kwargs)
    category.clear_domain_events()
    return category


class TestCategoryCreation:

    def test_happy_path(self):
        parent_id = uuid4()
        category = Category.create(
            CategoryName("Áo Dài Truyền Thống"), description="Trang phục", parent_id=parent_id
        )
        assert category.status == CategoryStatus.ACTIVE
        assert category.slug == CategorySlug("ao-dai-truyen-thong")
        assert not category.is_root
        [event] = category.domain_events
        assert isinstance(event, CategoryCreated)
        assert event.parent_id == parent_id
        assert event.slug == "ao-dai-truyen-thong"

    def test_root_category(self):
        assert Category.create(CategoryName("Thời trang")).is_root

    def test_own_id_as_parent_rejected(self):
        category_id = uuid4()
        with pytest.raises(ValidationError, match="own parent"):
            Category.create(CategoryName("Loop"), parent_id=category_id, category_id=category_id)


# ── Status transitions ───────────────────────────────────────────────────────


class TestCategoryStatus:

    def test_deactivate_and_activate(self):
        category = _make_category()
        category.deactivate()
        assert not category.is_active()
        category.activate()
        events = category.domain_events
        assert [type(e) for e in events] == [CategoryStatusChanged] * 2
        assert (events[0].old_status, events[0].new_status) == (1, 2)

    def test_transitions_are_idempotent(self):
        category = _make_category()
        stamp = category.updated_at
        category.activate()
        assert category.updated_at == stamp
        assert category.domain_events == ()

    def test_delete(self):
        category = _make_category()
        category.delete()
        category.delete()
        assert category.status == CategoryStatus.DELETED
        [event] = category.domain_events
        assert isinstance(event, CategoryDeleted)
        assert event.category_name == "Áo Dài Truyền Thống"


# ── Updates ──────────────────────────────────────────────────────────────────


class TestCategoryUpdates:

    def test_update_name(self):
        category = _make_category()
        category.update_name(CategoryName("Áo Dài Cách Tân"))
        [event] = category.domain_events
        assert isinstance(event, CategoryUpdated)
        assert (event.old_name, event.new_name) == ("Áo Dài Truyền Thống", "Áo Dài Cách Tân")

    def test_update_name_keeps_slug(self):
        category = _make_category()
        category.update_name(CategoryName("Áo Dài Cách Tân"))
        assert category.slug.value == "ao-dai-truyen-thong"

    def test_update_to_same_name_is_a_no_op(self):
        category = _make_category()
        category.update_name(CategoryName("Áo Dài Truyền Thống"))
        assert category.domain_events == ()

    def test_case_only_rename_is_a_change(self):
        category = _make_category("sách")
        category.update_name(CategoryName("Sách"))
        assert category.name.value == "Sách"
        assert len(category.domain_events) == 1

    def test_update_name_none_rejected(self):
        with pytest.raises(NullArgumentError) as exc_info:
            _make_category().update_name(None)
        assert exc_info.value.param_name == "name"

    def test_update_slug(self):
        category = _make_category()
        category.update_slug(CategorySlug("ao-dai"))
        category.update_slug(CategorySlug("ao-dai"))
        [event] = category.domain_events
        assert isinstance(event, CategorySlugChanged)
        assert (event.old_slug, event.new_slug) == ("ao-dai-truyen-thong", "ao-dai")

    def test_update_slug_none_rejected(self):
        with pytest.raises(NullArgumentError) as exc_info:
            _make_category().update_slug(None)
        assert exc_info.value.param_name == "slug"

    def test_description_and_sort_order_bump_timestamp_without_event(self):
        category = _make_category()
        stamp = category.updated_at
        category.update_description("Trang phục truyền thống")
        category.update_sort_order(5)
        assert category.description == "Trang phục truyền thống"
        assert category.sort_order == 5
        assert category.updated_at > stamp
        assert category.domain_events == ()

    def test_unchanged_description_and_sort_order_are_no_ops(self):
        category = _make_category(description="x", sort_order=2)
        stamp = category.updated_at
        category.update_description("x")
        category.update_sort_order(2)
        assert category.updated_at == stamp


# ── Hierarchy ────────────────────────────────────────────────────────────────


class TestCategoryParent:

    def test_change_parent(self):
        category = _make_category()
        new_parent = uuid4()
        category.change_parent(new_parent)
        assert category.parent_id == new_parent
        [event] = category.domain_events
        assert isinstance(event, CategoryParentChanged)
        assert (event.old_parent_id, event.new_parent_id) == (None, new_parent)

    def test_move_to_root(self):
        category = _make_category(parent_id=uuid4())
        category.change_parent(None)
        assert category.is_root

    def test_same_parent_is_a_no_op(self):
        parent_id = uuid4()
        category = _make_category(parent_id=parent_id)
        stamp = category.updated_at
        category.change_parent(parent_id)
        assert category.updated_at == stamp
        assert category.domain_events == ()

    def test_change_parent_twice_records_one_event(self):
        old_parent, new_parent = uuid4(), uuid4()
        category = _make_category(parent_id=old_parent)
        created = category.updated_at
        category.change_parent(new_parent)
        stamp = category.updated_at
        category.change_parent(new_parent)
        assert created < stamp
        assert category.updated_at == stamp
        [event] = category.domain_events
        assert (event.old_parent_id, event.new_parent_id) == (old_parent, new_parent)

    def test_own_id_rejected(self):
        category = _make_category()
        with pytest.raises(ValidationError, match="own parent"):
            category.change_parent(category.id)
