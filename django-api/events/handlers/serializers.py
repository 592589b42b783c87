"""Serializers for transforming domain models to API responses and reading
booking requests."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField()
    overview = serializers.CharField()
    image = serializers.CharField()
    venue = serializers.CharField()
    location = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()
    mode = serializers.CharField(source="mode.value")
    audience = serializers.CharField()
    agenda = serializers.ListField(child=serializers.CharField())
    organizer = serializers.CharField()
    tags = serializers.ListField(child=serializers.CharField())
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.UUIDField(source="id.value")
    eventId = serializers.UUIDField(source="event_id.value")
    email = serializers.CharField(source="email.value")
    createdAt = serializers.DateTimeField(source="created_at")


class BookingRequestSerializer(serializers.Serializer):
    """Shape of a booking request. Field rules are enforced by the service."""

    eventId = serializers.CharField(allow_blank=True)
    slug = serializers.CharField(required=False, allow_blank=True, default="")
    email = serializers.CharField(allow_blank=True, trim_whitespace=False)
