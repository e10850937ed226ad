"""Tests for domain event publishing."""

import logging

from shopflow.application.event_publisher import (
    InMemoryEventPublisher,
    LoggingEventPublisher,
    publish_pending_events,
)
from shopflow.domain.model.catalog_names import CategoryName
from shopflow.domain.model.category import Category


class TestPublishPendingEvents:

    def test_publishes_in_order_and_clears(self):
        category = Category.create(CategoryName("Sách"))
        category.deactivate()
        publisher = InMemoryEventPublisher()

        assert publish_pending_events(category, publisher) == 2
        assert [e.event_type for e in publisher.published] == [
            "CategoryCreated",
            "CategoryStatusChanged",
        ]
        assert category.domain_events == ()

    def test_nothing_pending(self):
        category = Category.create(CategoryName("Sách"))
        category.clear_domain_events()
        publisher = InMemoryEventPublisher()
        assert publish_pending_events(category, publisher) == 0
        assert publisher.published == []


class TestLoggingEventPublisher:

    def test_logs_one_line_per_event(self, caplog):
        caplog.set_level(logging.INFO, logger="shopflow.application.event_publisher")
        category = Category.create(CategoryName("Sách"))
        publish_pending_events(category, LoggingEventPublisher())
        assert len(caplog.records) == 1
        assert "CategoryCreated" in caplog.records[0].getMessage()
        assert str(category.id) in caplog.records[0].getMessage()
