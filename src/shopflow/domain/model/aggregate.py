"""Aggregate root base: identity, timestamps and pending domain events.

Concrete aggregates are mutable dataclasses. Their ``__init__`` is kept
simple so a repository can rehydrate stored state without re-validating
or re-recording events; new aggregates go through a ``create()``
factory instead.

Aggregates are not thread-safe. One unit of work mutates an instance at
a time. Timestamps are timezone-aware UTC; naive values passed to
``__init__`` are taken to be UTC.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from shopflow.domain.events import DomainEvent

if TYPE_CHECKING:
    from uuid import UUID

_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(moment: datetime) -> datetime:
    """Read a naive datetime as UTC; aware ones are converted to UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


@dataclass(eq=False)
class AggregateRoot:
    """Entity base class. Equality and hashing follow ``id``.

    Subclasses declare ``id``, ``created_at`` and ``updated_at`` fields
    and must be decorated with ``@dataclass(eq=False)`` so the id-based
    equality defined here is kept.
    """

    if TYPE_CHECKING:
        id: UUID
        created_at: datetime
        updated_at: datetime

    _domain_events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # Stored timestamps may come back naive; they are always UTC.
        self.created_at = as_utc(self.created_at)
        self.updated_at = as_utc(self.updated_at)

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    # --- Domain events --------------------------------------------------------

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Events recorded since the last ``clear_domain_events()``, oldest first."""
        return tuple(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def _record(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        """Advance ``updated_at``; it strictly increases even within one clock tick."""
        now = utc_now()
        if now <= self.updated_at:
            now = self.updated_at + _TICK
        self.updated_at = now
