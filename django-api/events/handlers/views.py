"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.apps import apps
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import (
    DanglingReferenceError,
    DomainError,
    DuplicateSlugError,
    EventNotFoundError,
    InvalidArgumentError,
    RecordValidationError,
)
from events.handlers.serializers import (
    BookingRequestSerializer,
    BookingSerializer,
    EventSerializer,
)
from events.services import BookingService, EventService

logger = logging.getLogger(__name__)

ERROR_STATUS = (
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (RecordValidationError, status.HTTP_400_BAD_REQUEST),
    (EventNotFoundError, status.HTTP_404_NOT_FOUND),
    (DanglingReferenceError, status.HTTP_404_NOT_FOUND),
    (DuplicateSlugError, status.HTTP_409_CONFLICT),
)


def event_service() -> EventService:
    return apps.get_app_config("events").event_service


def booking_service() -> BookingService:
    return apps.get_app_config("events").booking_service


def error_response(error: Exception, fallback: str) -> Response:
    """Map an error to a ``{success: false, error}`` response.

    Unknown errors become a 500 carrying ``fallback`` only.
    """
    if isinstance(error, DomainError):
        for kind, code in ERROR_STATUS:
            if isinstance(error, kind):
                body = {"success": False, "error": error.message}
                if isinstance(error, RecordValidationError) and error.errors:
                    body["errors"] = error.errors
                return Response(body, status=code)
        logger.error("Unhandled domain error: %s", error)
    else:
        logger.exception("Unexpected error: %s", fallback)
    return Response(
        {"success": False, "error": fallback},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        try:
            events = event_service().list_events()
        except Exception as exc:
            return error_response(exc, "An unexpected error occurred while fetching events")
        return Response({"success": True, "data": EventSerializer(events, many=True).data})

    def post(self, request: Request) -> Response:
        if not isinstance(request.data, dict):
            return Response(
                {"success": False, "error": "Invalid request data"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            event = event_service().create_event(request.data)
        except Exception as exc:
            return error_response(exc, "An unexpected error occurred while creating the event")
        return Response(
            {"success": True, "data": EventSerializer(event).data},
            status=status.HTTP_201_CREATED,
        )


class EventDetailView(APIView):
    """Handler for GET /api/events/{slug}"""

    def get(self, request: Request, slug: str) -> Response:
        try:
            event = event_service().get_event_by_slug(slug)
        except Exception as exc:
            return error_response(exc, "An unexpected error occurred while fetching the event")
        return Response({"success": True, "data": EventSerializer(event).data})


class BookingCreateView(APIView):
    """Handler for POST /api/bookings"""

    def post(self, request: Request) -> Response:
        serializer = BookingRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"success": False, "error": "Invalid request data", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        payload = serializer.validated_data
        try:
            booking = booking_service().create_booking(
                payload["eventId"], payload["email"], slug=payload["slug"] or None
            )
        except Exception as exc:
            return error_response(exc, "An unexpected error occurred while creating the booking")
        return Response(
            {"success": True, "data": BookingSerializer(booking).data},
            status=status.HTTP_201_CREATED,
        )
