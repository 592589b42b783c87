"""Canonical forms for event fields, applied before every write.

Slug, date and time are derived or rewritten only when their source field
changes, so re-saving an untouched event never alters them.
"""

import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from dateutil import parser, tz

from events.domain.errors import InvalidDateError, InvalidTimeError, RecordValidationError
from events.domain.models import EVENT_FIELDS, EventData
from events.domain.validation import clean_event_fields

_NON_SLUG_CHARS = re.compile(r"[^\w\s-]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")

STRICT_TIME = re.compile(r"(?:[01]\d|2[0-3]):[0-5]\d", re.ASCII)
CLOCK_TIME = re.compile(r"(\d{1,2}):([0-5]\d)", re.ASCII)
MERIDIEM_TIME = re.compile(r"(\d{1,2})(?::([0-5]\d))?\s*(am|pm)", re.IGNORECASE | re.ASCII)

# Two defaults that differ in every date component; a value that parses to
# different dates under each is missing part of the date.
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)


def slugify(title: str) -> str:
    """Return the URL-safe slug for ``title``.

    >>> slugify("  Hello, World -- 2025! ")
    'hello-world-2025'
    """
    slug = title.lower().strip()
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def normalize_date(value: str) -> str:
    """Parse a calendar date and return it as ``YYYY-MM-DD``.

    Raises:
        InvalidDateError: If the value is not a complete, valid date.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(value)
    text = value.strip()
    try:
        first = parser.parse(text, default=_DEFAULT_A)
        second = parser.parse(text, default=_DEFAULT_B)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(value) from exc
    if first.date() != second.date():
        raise InvalidDateError(value)
    if first.tzinfo is not None:
        first = first.astimezone(tz.UTC)
    return first.date().isoformat()


def normalize_time(value: str) -> str:
    """Return ``value`` as a 24-hour ``HH:MM`` string.

    Strict ``HH:MM`` input is returned unchanged; ``H:MM`` and
    ``H[:MM] am|pm`` forms are converted.

    Raises:
        InvalidTimeError: If no supported form matches.
    """
    if not isinstance(value, str):
        raise InvalidTimeError(value)
    text = value.strip()
    if STRICT_TIME.fullmatch(text):
        return text

    match = MERIDIEM_TIME.fullmatch(text)
    if match:
        hours = int(match.group(1))
        minutes = match.group(2) or "00"
        meridiem = match.group(3).lower()
        if not 1 <= hours <= 12:
            raise InvalidTimeError(value)
        if meridiem == "pm" and hours != 12:
            hours += 12
        if meridiem == "am" and hours == 12:
            hours = 0
        return f"{hours:02d}:{minutes}"

    match = CLOCK_TIME.fullmatch(text)
    if match and int(match.group(1)) <= 23:
        return f"{int(match.group(1)):02d}:{match.group(2)}"

    raise InvalidTimeError(value)


def prepare_event(changes: Mapping[str, Any], previous: EventData | None = None) -> EventData:
    """Validate ``changes`` and produce the normalized record to persist.

    On create (``previous`` is None) every field is required. On update only
    the given fields are checked and merged over ``previous``; slug, date and
    time are recomputed only when their source value actually changed.

    Raises:
        RecordValidationError: If a field is missing or malformed.
        InvalidDateError: If the date cannot be parsed.
        InvalidTimeError: If the time cannot be parsed.
    """
    cleaned = clean_event_fields(changes, partial=previous is not None)
    values: dict[str, Any] = {}
    if previous is not None:
        values = {name: getattr(previous, name) for name in EVENT_FIELDS}
    values.update(cleaned)

    if _changed("title", cleaned, previous):
        values["slug"] = slugify(values["title"])
        if not values["slug"]:
            raise RecordValidationError.for_fields(
                {"title": "Title must contain at least one letter or digit"}
            )
    if _changed("date", cleaned, previous):
        values["date"] = normalize_date(values["date"])
    if _changed("time", cleaned, previous):
        values["time"] = normalize_time(values["time"])

    return EventData(**values)


def _changed(name: str, cleaned: dict[str, Any], previous: EventData | None) -> bool:
    if name not in cleaned:
        return False
    return previous is None or cleaned[name] != getattr(previous, name)
