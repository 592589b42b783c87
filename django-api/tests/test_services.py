"""Unit tests for EventService and BookingService.

These test error handling and domain error mapping against in-memory stores.
Run with: pytest tests/test_services.py -v
"""

import uuid

import pytest

from events.domain import EventId
from events.domain.errors import (
    DanglingReferenceError,
    DuplicateSlugError,
    EventNotFoundError,
    InvalidEventIdError,
    InvalidSlugError,
    InvalidTimeError,
    RecordValidationError,
)


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, event_service):
        """get_event raises InvalidEventIdError for malformed UUID."""
        with pytest.raises(InvalidEventIdError):
            event_service.get_event("not-a-uuid")

    def test_get_event_not_found_raises_error(self, event_service):
        """get_event raises EventNotFoundError when store returns None."""
        with pytest.raises(EventNotFoundError):
            event_service.get_event(str(uuid.uuid4()))

    @pytest.mark.parametrize("slug", ["", "   ", None, 42])
    def test_get_by_slug_rejects_blank_without_store_access(self, event_service, event_store, slug):
        """get_event_by_slug raises InvalidSlugError before touching the store."""
        with pytest.raises(InvalidSlugError):
            event_service.get_event_by_slug(slug)
        assert event_store.slug_lookups == []

    def test_get_by_slug_not_found(self, event_service):
        """get_event_by_slug raises EventNotFoundError naming the slug."""
        with pytest.raises(EventNotFoundError) as excinfo:
            event_service.get_event_by_slug("missing-event")
        assert excinfo.value.message == "Event with slug 'missing-event' not found"

    def test_get_by_slug_trims_input(self, event_service, event_store, event_payload):
        """Given a padded slug, looks up the trimmed value."""
        created = event_service.create_event(event_payload)

        found = event_service.get_event_by_slug("  pycon-berlin-2025 ")

        assert found == created
        assert event_store.slug_lookups == ["pycon-berlin-2025"]

    def test_create_event_normalizes_fields(self, event_service, event_payload):
        """create_event stores the slug and canonical date and time."""
        event_payload.update(title="  PyCon Berlin 2025 ", date="April 23, 2025", time="2:30 PM")

        event = event_service.create_event(event_payload)

        assert event.title == "PyCon Berlin 2025"
        assert event.slug == "pycon-berlin-2025"
        assert event.date == "2025-04-23"
        assert event.time == "14:30"

    def test_create_event_invalid_fields_store_nothing(self, event_service, event_store, event_payload):
        """create_event raises RecordValidationError and persists nothing."""
        del event_payload["organizer"]

        with pytest.raises(RecordValidationError) as excinfo:
            event_service.create_event(event_payload)

        assert excinfo.value.errors == {"organizer": "Organizer is required"}
        assert event_store.events == {}

    def test_create_event_invalid_time(self, event_service, event_store, event_payload):
        event_payload["time"] = "25:00"

        with pytest.raises(InvalidTimeError):
            event_service.create_event(event_payload)
        assert event_store.events == {}

    def test_create_event_duplicate_slug(self, event_service, event_payload):
        """Two titles with the same slug cannot both be stored."""
        event_service.create_event(event_payload)
        event_payload["title"] = "PyCon  Berlin 2025!"

        with pytest.raises(DuplicateSlugError):
            event_service.create_event(event_payload)

    def test_update_event_recomputes_changed_fields(self, event_service, event_payload):
        """update_event re-derives the slug for a new title and keeps the rest."""
        event = event_service.create_event(event_payload)

        updated = event_service.update_event(
            str(event.id), {"title": "PyCon DE 2025", "time": "7pm"}
        )

        assert updated.id == event.id
        assert updated.slug == "pycon-de-2025"
        assert updated.time == "19:00"
        assert updated.date == event.date
        assert updated.created_at == event.created_at
        assert updated.updated_at > event.updated_at

    def test_update_event_not_found(self, event_service):
        with pytest.raises(EventNotFoundError):
            event_service.update_event(str(uuid.uuid4()), {"venue": "Hall B"})

    def test_list_events_newest_first(self, event_service, event_payload):
        first = event_service.create_event(event_payload)
        second = event_service.create_event({**event_payload, "title": "DjangoCon Europe"})

        assert event_service.list_events() == [second, first]


class TestBookingService:
    """Tests for BookingService."""

    def test_create_booking_for_missing_event(self, booking_service, booking_store):
        """A booking that references no event raises and persists nothing."""
        event_id = str(uuid.uuid4())

        with pytest.raises(DanglingReferenceError) as excinfo:
            booking_service.create_booking(event_id, "ada@example.com")

        assert excinfo.value.event_id == event_id
        assert booking_store.bookings == []

    def test_create_booking_invalid_event_id(self, booking_service, booking_store):
        with pytest.raises(InvalidEventIdError):
            booking_service.create_booking("42", "ada@example.com")
        assert booking_store.bookings == []

    def test_create_booking_invalid_email(self, booking_service, event_service, event_payload):
        event = event_service.create_event(event_payload)

        with pytest.raises(RecordValidationError) as excinfo:
            booking_service.create_booking(str(event.id), "not-an-email")

        assert "email" in excinfo.value.errors

    def test_create_booking_success(self, booking_service, booking_store, event_service, event_payload):
        """Given an existing event, stores the lower-cased email."""
        event = event_service.create_event(event_payload)

        booking = booking_service.create_booking(
            str(event.id), "  Ada@Example.com ", slug=event.slug
        )

        assert booking.event_id == event.id
        assert booking.email.value == "ada@example.com"
        assert booking_store.bookings == [booking]

    def test_list_bookings_for_event(self, booking_service, event_service, event_payload):
        event = event_service.create_event(event_payload)
        other = event_service.create_event({**event_payload, "title": "DjangoCon Europe"})
        first = booking_service.create_booking(str(event.id), "ada@example.com")
        booking_service.create_booking(str(other.id), "grace@example.com")
        second = booking_service.create_booking(str(event.id), "linus@example.com")

        assert booking_service.list_bookings_for_event(event.slug) == [second, first]

    def test_list_bookings_unknown_slug(self, booking_service):
        with pytest.raises(EventNotFoundError):
            booking_service.list_bookings_for_event("nope")

    @pytest.mark.parametrize("slug", ["", "   ", None])
    def test_list_bookings_blank_slug(self, booking_service, event_store, slug):
        """A blank slug is rejected before any event lookup."""
        with pytest.raises(InvalidSlugError):
            booking_service.list_bookings_for_event(slug)
        assert event_store.slug_lookups == []

    def test_list_bookings_strips_slug(self, booking_service, event_store, event_service, event_payload):
        event = event_service.create_event(event_payload)
        booking = booking_service.create_booking(str(event.id), "ada@example.com")

        assert booking_service.list_bookings_for_event("  pycon-berlin-2025 ") == [booking]
        assert event_store.slug_lookups == ["pycon-berlin-2025"]

    def test_event_id_value_object_accepted(self, booking_service, event_service, event_payload):
        event = event_service.create_event(event_payload)

        booking = booking_service.create_booking(EventId(event.id.value), "ada@example.com")

        assert booking.event_id == event.id
