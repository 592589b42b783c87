"""Django ORM implementation of the EventStore and BookingStore."""

import logging

from django.db import IntegrityError, transaction

from events import models
from events.domain import Booking, BookingId, Email, Event, EventData, EventId, EventMode
from events.domain.errors import DuplicateSlugError
from events.stores.connection import connect_db
from events.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)


def to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        slug=row.slug,
        description=row.description,
        overview=row.overview,
        image=row.image,
        venue=row.venue,
        location=row.location,
        date=row.date,
        time=row.time,
        mode=EventMode(row.mode),
        audience=row.audience,
        agenda=tuple(row.agenda),
        organizer=row.organizer,
        tags=tuple(row.tags),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_booking(row: models.Booking) -> Booking:
    return Booking(
        id=BookingId(row.id),
        event_id=EventId(row.event_id),
        email=Email(row.email),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _apply(row: models.Event, data: EventData) -> None:
    row.title = data.title
    row.slug = data.slug
    row.description = data.description
    row.overview = data.overview
    row.image = data.image
    row.venue = data.venue
    row.location = data.location
    row.date = data.date
    row.time = data.time
    row.mode = data.mode.value
    row.audience = data.audience
    row.agenda = list(data.agenda)
    row.organizer = data.organizer
    row.tags = list(data.tags)


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        connect_db()
        return [to_event(row) for row in models.Event.objects.all()]

    def get_event(self, event_id: EventId) -> Event | None:
        connect_db()
        row = models.Event.objects.filter(id=event_id.value).first()
        return to_event(row) if row is not None else None

    def get_event_by_slug(self, slug: str) -> Event | None:
        connect_db()
        row = models.Event.objects.filter(slug=slug).first()
        return to_event(row) if row is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        connect_db()
        return models.Event.objects.filter(id=event_id.value).exists()

    def add_event(self, data: EventData) -> Event:
        connect_db()
        row = models.Event()
        _apply(row, data)
        self._save(row)
        return to_event(row)

    def update_event(self, event_id: EventId, data: EventData) -> Event:
        connect_db()
        row = models.Event.objects.get(id=event_id.value)
        _apply(row, data)
        self._save(row)
        return to_event(row)

    def _save(self, row: models.Event) -> None:
        if models.Event.objects.filter(slug=row.slug).exclude(id=row.id).exists():
            raise DuplicateSlugError(row.slug)
        try:
            with transaction.atomic():
                row.save()
        except IntegrityError as exc:
            # Lost a race with a concurrent writer of the same slug.
            logger.warning("Slug %s was taken while saving event %s", row.slug, row.id)
            raise DuplicateSlugError(row.slug) from exc


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM."""

    def add_booking(self, event_id: EventId, email: Email) -> Booking:
        connect_db()
        row = models.Booking.objects.create(event_id=event_id.value, email=email.value)
        return to_booking(row)

    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        connect_db()
        rows = models.Booking.objects.filter(event_id=event_id.value)
        return [to_booking(row) for row in rows]
