"""Integration tests for the CreateCategory use case."""

from uuid import uuid4

import pytest

from shopflow.application.create_category import CreateCategoryHandler
from shopflow.application.event_publisher import InMemoryEventPublisher
from shopflow.domain.exceptions import EntityNotFoundError, IllegalStateError, ValidationError
from shopflow.domain.model.catalog_names import CategoryName, CategorySlug
from shopflow.domain.model.category import Category
from tests.fakes import FakeCategoryRepository


def _setup(*categories: Category):
    repo = FakeCategoryRepository(list(categories))
    publisher = InMemoryEventPublisher()
    return CreateCategoryHandler(repo, publisher), repo, publisher


class TestCreateCategory:

    def test_creates_root_category_with_derived_slug(self):
        handler, repo, publisher = _setup()
        category = handler.handle("  Áo   dài ")
        assert category.name.value == "Áo dài"
        assert category.slug == CategorySlug("ao-dai")
        assert category.is_root
        assert repo.get_by_slug(CategorySlug("ao-dai")) is category
        assert [e.event_type for e in publisher.published] == ["CategoryCreated"]
        assert category.domain_events == ()

    def test_explicit_slug(self):
        handler, _, _ = _setup()
        category = handler.handle("Áo dài", slug="ao-dai-nu")
        assert category.slug.value == "ao-dai-nu"

    def test_duplicate_slug_rejected(self):
        handler, _, publisher = _setup()
        handler.handle("Áo dài")
        with pytest.raises(ValidationError, match="'ao-dai' is already in use"):
            handler.handle("Ao Dai")
        assert len(publisher.published) == 1

    def test_under_existing_parent(self):
        fashion = Category.create(CategoryName("Thời trang"))
        handler, _, _ = _setup(fashion)
        category = handler.handle("Áo dài", parent_id=fashion.id, sort_order=3)
        assert category.parent_id == fashion.id
        assert category.sort_order == 3

    def test_unknown_parent_rejected(self):
        handler, repo, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.handle("Áo dài", parent_id=uuid4())
        assert repo.get_by_slug(CategorySlug("ao-dai")) is None

    def test_deleted_parent_rejected(self):
        fashion = Category.create(CategoryName("Thời trang"))
        fashion.delete()
        handler, _, _ = _setup(fashion)
        with pytest.raises(IllegalStateError, match="deleted category"):
            handler.handle("Áo dài", parent_id=fashion.id)
