"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, fields
from datetime import datetime

from events.domain.value_objects import BookingId, Email, EventId, EventMode


@dataclass(frozen=True)
class EventData:
    """Normalized, writable fields of an Event.

    Produced by ``prepare_event``; stores persist it as-is.
    """

    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: EventMode
    audience: str
    agenda: tuple[str, ...]
    organizer: str
    tags: tuple[str, ...]


@dataclass(frozen=True)
class Event(EventData):
    """Domain representation of an Event."""

    id: EventId
    created_at: datetime
    updated_at: datetime

    def to_data(self) -> EventData:
        return EventData(**{name: getattr(self, name) for name in EVENT_FIELDS})


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: BookingId
    event_id: EventId
    email: Email
    created_at: datetime
    updated_at: datetime


EVENT_FIELDS = tuple(f.name for f in fields(EventData))
