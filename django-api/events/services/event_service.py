"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain import Event, EventId, prepare_event
from events.domain.errors import EventNotFoundError, InvalidEventIdError, InvalidSlugError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def parse_event_id(event_id: Any) -> EventId:
    """Raises InvalidEventIdError unless ``event_id`` is a UUID string."""
    if isinstance(event_id, EventId):
        return event_id
    if not isinstance(event_id, str):
        raise InvalidEventIdError()
    try:
        return EventId.from_string(event_id.strip())
    except ValueError:
        raise InvalidEventIdError() from None


def parse_slug(slug: Any) -> str:
    """Raises InvalidSlugError unless ``slug`` is a non-blank string."""
    if not isinstance(slug, str) or not slug.strip():
        raise InvalidSlugError()
    return slug.strip()


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id=str(parsed))
        return event

    def get_event_by_slug(self, slug: Any) -> Event:
        """Return the event published under ``slug``.

        Raises:
            InvalidSlugError: If slug is not a string or is blank. The store
                is not touched in that case.
            EventNotFoundError: If no event has that slug.
        """
        event = self._store.get_event_by_slug(parse_slug(slug))
        if event is None:
            raise EventNotFoundError(slug=slug)
        return event

    def create_event(self, data: Mapping[str, Any]) -> Event:
        """Validate, normalize and persist a new event.

        Raises:
            RecordValidationError: If a field is missing or malformed
                (InvalidDateError / InvalidTimeError for bad date or time).
            DuplicateSlugError: If the title's slug is already taken.
        """
        prepared = prepare_event(data)
        event = self._store.add_event(prepared)
        logger.info("Created event %s (%s)", event.id, event.slug)
        return event

    def update_event(self, event_id: str, changes: Mapping[str, Any]) -> Event:
        """Apply ``changes`` to an existing event.

        Slug, date and time are only recomputed when title, date or time
        actually change.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            RecordValidationError: If a changed field is malformed.
            DuplicateSlugError: If a new title collides with another event.
        """
        current = self.get_event(event_id)
        prepared = prepare_event(changes, previous=current.to_data())
        event = self._store.update_event(current.id, prepared)
        logger.info("Updated event %s (%s)", event.id, event.slug)
        return event
