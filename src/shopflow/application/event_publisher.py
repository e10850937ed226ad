"""Domain event publishing.

Aggregates only queue events. Once a use case has saved an aggregate it
hands the queued events to a ``DomainEventPublisher`` and clears the
queue, so an event is never published for state that was not persisted.
Transport to external consumers sits behind this port.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from shopflow.domain.events import DomainEvent
from shopflow.domain.model.aggregate import AggregateRoot

logger = logging.getLogger(__name__)


class DomainEventPublisher(ABC):

    @abstractmethod
    def publish(self, events: Iterable[DomainEvent]) -> None:
        """Deliver *events* in the order given."""


class LoggingEventPublisher(DomainEventPublisher):
    """Writes one log line per event; the default when no transport is wired."""

    def publish(self, events: Iterable[DomainEvent]) -> None:
        for event in events:
            logger.info(
                "%s aggregate=%s %s",
                event.event_type,
                event.aggregate_id,
                event.payload(),
            )


class InMemoryEventPublisher(DomainEventPublisher):
    """Collects published events in memory."""

    def __init__(self) -> None:
        self.published: list[DomainEvent] = []

    def publish(self, events: Iterable[DomainEvent]) -> None:
        self.published.extend(events)


def publish_pending_events(aggregate: AggregateRoot, publisher: DomainEventPublisher) -> int:
    """Publish and clear the events queued on *aggregate*. Returns how many were sent."""
    events = aggregate.domain_events
    if not events:
        return 0
    publisher.publish(events)
    aggregate.clear_domain_events()
    return len(events)
