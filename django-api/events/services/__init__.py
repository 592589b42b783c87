from events.services.booking_service import BookingService
from events.services.event_service import EventService, parse_event_id, parse_slug

__all__ = ["EventService", "BookingService", "parse_event_id", "parse_slug"]
