"""Unit tests for domain event records and the pending-event queue."""

import dataclasses
from uuid import uuid4

import pytest

from shopflow.domain.events import CategoryParentChanged, UserCreated, UserStatusChanged
from shopflow.domain.model.user import User
from shopflow.domain.model.value_objects import Email


class TestDomainEvent:

    def test_envelope(self):
        aggregate_id = uuid4()
        event = UserCreated(aggregate_id=aggregate_id, email="a@shop.vn")
        assert event.aggregate_id == aggregate_id
        assert event.event_type == "UserCreated"
        assert event.occurred_at.tzinfo is not None
        assert event.event_id != UserCreated(aggregate_id=aggregate_id, email="a@shop.vn").event_id

    def test_payload_excludes_envelope(self):
        old, new = uuid4(), uuid4()
        event = CategoryParentChanged(aggregate_id=uuid4(), old_parent_id=old, new_parent_id=new)
        assert event.payload() == {"old_parent_id": old, "new_parent_id": new}

    def test_events_are_immutable(self):
        event = UserStatusChanged(aggregate_id=uuid4(), old_status=1, new_status=4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.new_status = 2

    def test_fields_are_keyword_only(self):
        with pytest.raises(TypeError):
            UserCreated(uuid4(), "a@shop.vn")


class TestPendingEvents:

    def test_events_kept_in_order_until_cleared(self):
        user = User.create(Email("a@shop.vn"), "hash")
        user.suspend()
        user.ban()
        assert [e.event_type for e in user.domain_events] == [
            "UserCreated",
            "UserStatusChanged",
            "UserStatusChanged",
        ]
        user.clear_domain_events()
        assert user.domain_events == ()

    def test_domain_events_is_a_snapshot(self):
        user = User.create(Email("a@shop.vn"), "hash")
        snapshot = user.domain_events
        user.suspend()
        assert len(snapshot) == 1
        assert len(user.domain_events) == 2
