from events.domain.models import EVENT_FIELDS, Booking, Event, EventData
from events.domain.normalization import normalize_date, normalize_time, prepare_event, slugify
from events.domain.validation import clean_email, clean_event_fields
from events.domain.value_objects import BookingId, Email, EventId, EventMode

__all__ = [
    "Event",
    "EventData",
    "Booking",
    "EVENT_FIELDS",
    "EventId",
    "BookingId",
    "EventMode",
    "Email",
    "slugify",
    "normalize_date",
    "normalize_time",
    "prepare_event",
    "clean_event_fields",
    "clean_email",
]
