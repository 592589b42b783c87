from django.urls import path, re_path

from events.handlers import BookingCreateView, EventDetailView, EventListView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    # An empty slug still reaches the view so it can answer 400.
    re_path(r"^events/(?P<slug>[^/]*)$", EventDetailView.as_view(), name="event-detail"),
    path("bookings", BookingCreateView.as_view(), name="booking-create"),
]
