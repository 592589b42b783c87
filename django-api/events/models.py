"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py,
and normalization runs in domain/normalization.py before anything is saved.
"""

import uuid

from django.db import models

from events.domain.validation import EMAIL_MAX_LENGTH, MAX_LENGTHS
from events.domain.value_objects import EventMode


class Event(models.Model):
    """Persistence model for events."""

    class Mode(models.TextChoices):
        ONLINE = EventMode.ONLINE.value, "Online"
        OFFLINE = EventMode.OFFLINE.value, "Offline"
        HYBRID = EventMode.HYBRID.value, "Hybrid"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=MAX_LENGTHS["title"])
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField()
    overview = models.TextField()
    image = models.CharField(max_length=MAX_LENGTHS["image"])
    venue = models.CharField(max_length=MAX_LENGTHS["venue"])
    location = models.CharField(max_length=MAX_LENGTHS["location"])
    date = models.CharField(max_length=10)
    time = models.CharField(max_length=5)
    mode = models.CharField(max_length=10, choices=Mode.choices)
    audience = models.CharField(max_length=MAX_LENGTHS["audience"])
    agenda = models.JSONField(default=list)
    organizer = models.CharField(max_length=MAX_LENGTHS["organizer"])
    tags = models.JSONField(default=list)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="events_event_created_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class Booking(models.Model):
    """Persistence model for bookings.

    The event reference is checked once, when the booking is created; the
    database does not enforce it and deleting an event leaves its bookings.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        Event,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="bookings",
    )
    email = models.EmailField(max_length=EMAIL_MAX_LENGTH)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.email} - {self.event_id}"
