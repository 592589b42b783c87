from events.handlers.views import BookingCreateView, EventDetailView, EventListView

__all__ = ["EventListView", "EventDetailView", "BookingCreateView"]
