"""Booking service - RSVP creation and lookup."""

import logging
from typing import Any

from events.domain import Booking, clean_email
from events.domain.errors import DanglingReferenceError, EventNotFoundError
from events.services.event_service import parse_event_id, parse_slug
from events.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for booking operations."""

    def __init__(self, bookings: BookingStore, events: EventStore) -> None:
        self._bookings = bookings
        self._events = events

    def create_booking(self, event_id: Any, email: Any, slug: str | None = None) -> Booking:
        """Book a seat for ``email`` at the given event.

        The event must exist at the moment of booking. Nothing keeps the
        reference valid afterwards.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            RecordValidationError: If the email is missing or malformed.
            DanglingReferenceError: If no event has that ID. Nothing is stored.
        """
        parsed = parse_event_id(event_id)
        address = clean_email(email)

        if not self._events.event_exists(parsed):
            logger.warning("Rejected booking for missing event %s", parsed)
            raise DanglingReferenceError(str(parsed))

        booking = self._bookings.add_booking(parsed, address)
        logger.info("Created booking %s for event %s (%s)", booking.id, parsed, slug or "-")
        return booking

    def list_bookings_for_event(self, slug: Any) -> list[Booking]:
        """Return the bookings of the event published under ``slug``.

        Raises:
            InvalidSlugError: If slug is not a string or is blank.
            EventNotFoundError: If no event has that slug.
        """
        event = self._events.get_event_by_slug(parse_slug(slug))
        if event is None:
            raise EventNotFoundError(slug=slug)
        return self._bookings.list_bookings_for_event(event.id)
