from django.apps import AppConfig


class EventsConfig(AppConfig):
    """Configuration for the events application.

    Stores and services are built once here and shared by every request.
    """

    name = "events"
    verbose_name = "Events"

    def ready(self) -> None:
        from events.services import BookingService, EventService
        from events.stores import DjangoBookingStore, DjangoEventStore

        event_store = DjangoEventStore()
        self.event_service = EventService(event_store)
        self.booking_service = BookingService(DjangoBookingStore(), event_store)
