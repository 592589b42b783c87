"""Pytest configuration and shared fixtures."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from events.domain import EVENT_FIELDS, Booking, BookingId, Email, Event, EventData, EventId
from events.domain.errors import DuplicateSlugError
from events.services import BookingService, EventService
from events.stores.interfaces import BookingStore, EventStore


class InMemoryEventStore(EventStore):
    """EventStore fake that records every slug lookup."""

    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}
        self.slug_lookups: list[str] = []
        self._clock = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def list_events(self) -> list[Event]:
        return sorted(self.events.values(), key=lambda e: e.created_at, reverse=True)

    def get_event(self, event_id: EventId) -> Event | None:
        return self.events.get(event_id)

    def get_event_by_slug(self, slug: str) -> Event | None:
        self.slug_lookups.append(slug)
        return next((e for e in self.events.values() if e.slug == slug), None)

    def event_exists(self, event_id: EventId) -> bool:
        return event_id in self.events

    def add_event(self, data: EventData) -> Event:
        self._check_slug(data.slug, None)
        now = self._tick()
        event = Event(**_fields(data), id=EventId(uuid.uuid4()), created_at=now, updated_at=now)
        self.events[event.id] = event
        return event

    def update_event(self, event_id: EventId, data: EventData) -> Event:
        self._check_slug(data.slug, event_id)
        current = self.events[event_id]
        event = Event(
            **_fields(data),
            id=event_id,
            created_at=current.created_at,
            updated_at=self._tick(),
        )
        self.events[event_id] = event
        return event

    def _check_slug(self, slug: str, owner: EventId | None) -> None:
        for event in self.events.values():
            if event.slug == slug and event.id != owner:
                raise DuplicateSlugError(slug)

    def _tick(self) -> datetime:
        self._clock += timedelta(minutes=1)
        return self._clock


class InMemoryBookingStore(BookingStore):
    def __init__(self) -> None:
        self.bookings: list[Booking] = []

    def add_booking(self, event_id: EventId, email: Email) -> Booking:
        now = datetime.now(timezone.utc)
        booking = Booking(
            id=BookingId(uuid.uuid4()),
            event_id=event_id,
            email=email,
            created_at=now,
            updated_at=now,
        )
        self.bookings.append(booking)
        return booking

    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        found = [b for b in self.bookings if b.event_id == event_id]
        return list(reversed(found))


def _fields(data: EventData) -> dict:
    return {name: getattr(data, name) for name in EVENT_FIELDS}


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def event_payload() -> dict:
    return {
        "title": "PyCon Berlin 2025",
        "description": "Three days of talks, tutorials and sprints.",
        "overview": "The community conference for Python developers.",
        "image": "/images/pycon-berlin.png",
        "venue": "bcc Berlin Congress Center",
        "location": "Berlin, Germany",
        "date": "2025-04-23",
        "time": "09:00",
        "mode": "hybrid",
        "audience": "Developers and data scientists",
        "agenda": ["Registration", "Keynote", "Lightning talks"],
        "organizer": "Python Software Verband",
        "tags": ["python", "conference"],
    }


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def event_service(event_store: InMemoryEventStore) -> EventService:
    return EventService(event_store)


@pytest.fixture
def booking_service(
    booking_store: InMemoryBookingStore, event_store: InMemoryEventStore
) -> BookingService:
    return BookingService(booking_store, event_store)


@pytest.fixture
def stored_event(db, event_payload: dict) -> Event:
    """An event persisted through the application's own service."""
    return apps.get_app_config("events").event_service.create_event(event_payload)
