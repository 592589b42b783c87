"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Booking, Email, Event, EventData, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_by_slug(self, slug: str) -> Event | None:
        """Return the event owning ``slug``, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def add_event(self, data: EventData) -> Event:
        """Persist a new event.

        Raises:
            DuplicateSlugError: If another event already has ``data.slug``.
        """
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, data: EventData) -> Event:
        """Overwrite an existing event's fields and refresh updated_at.

        Raises:
            DuplicateSlugError: If another event already has ``data.slug``.
        """
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def add_booking(self, event_id: EventId, email: Email) -> Booking:
        """Persist a new booking. The event reference is not re-checked."""
        ...

    @abstractmethod
    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        """Return bookings for an event ordered by created_at descending."""
        ...
