from events.stores.connection import ConnectionCache, connect_db
from events.stores.django_store import DjangoBookingStore, DjangoEventStore
from events.stores.interfaces import BookingStore, EventStore

__all__ = [
    "EventStore",
    "BookingStore",
    "DjangoEventStore",
    "DjangoBookingStore",
    "ConnectionCache",
    "connect_db",
]
