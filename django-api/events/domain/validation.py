"""Schema-level checks for incoming event and booking fields.

Every check collects its message per field so callers get all problems at
once instead of the first one.
"""

from collections.abc import Mapping
from typing import Any

from events.domain.errors import RecordValidationError
from events.domain.value_objects import Email, EventMode

REQUIRED_MESSAGES = {
    "title": "Title is required",
    "description": "Description is required",
    "overview": "Overview is required",
    "image": "Image is required",
    "venue": "Venue is required",
    "location": "Location is required",
    "date": "Date is required",
    "time": "Time is required",
    "mode": "Mode is required",
    "audience": "Audience is required",
    "agenda": "Agenda is required",
    "organizer": "Organizer is required",
    "tags": "Tags are required",
}

EMPTY_LIST_MESSAGES = {
    "agenda": "Agenda must have at least one item",
    "tags": "At least one tag is required",
}

# Column widths of the stored record. Date and time are bounded by their
# normalized forms instead.
MAX_LENGTHS = {
    "title": 255,
    "image": 500,
    "venue": 255,
    "location": 255,
    "audience": 255,
    "organizer": 255,
}
EMAIL_MAX_LENGTH = 254

INPUT_FIELDS = tuple(REQUIRED_MESSAGES)
LIST_FIELDS = frozenset(EMPTY_LIST_MESSAGES)
# Image references are stored verbatim.
UNTRIMMED_FIELDS = frozenset({"image"})


def clean_event_fields(data: Mapping[str, Any], partial: bool = False) -> dict[str, Any]:
    """Trim and check event input.

    Unknown keys are ignored. With ``partial`` only the keys present in
    ``data`` are checked, which is what updates need.

    Raises:
        RecordValidationError: If any field is missing or malformed.
    """
    cleaned: dict[str, Any] = {}
    errors: dict[str, str] = {}

    for name in INPUT_FIELDS:
        if name not in data:
            if not partial:
                errors[name] = REQUIRED_MESSAGES[name]
            continue

        value = data[name]
        try:
            if name in LIST_FIELDS:
                cleaned[name] = _clean_list(name, value)
            elif name == "mode":
                cleaned[name] = _clean_mode(value)
            else:
                cleaned[name] = _clean_text(name, value)
        except ValueError as exc:
            errors[name] = str(exc)

    if errors:
        raise RecordValidationError.for_fields(errors)
    return cleaned


def clean_email(value: Any) -> Email:
    """Return the trimmed, lower-cased email.

    Raises:
        RecordValidationError: If the value is missing or not ``local@domain.tld``.
    """
    if not isinstance(value, str) or not value.strip():
        raise RecordValidationError.for_fields({"email": "Email is required"})
    if len(value.strip()) > EMAIL_MAX_LENGTH:
        raise RecordValidationError.for_fields(
            {"email": f"Email must be at most {EMAIL_MAX_LENGTH} characters"}
        )
    try:
        return Email(value.strip().lower())
    except ValueError as exc:
        raise RecordValidationError.for_fields({"email": str(exc)}) from exc


def _clean_text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name.capitalize()} must be text")
    if name not in UNTRIMMED_FIELDS:
        value = value.strip()
    if not value:
        raise ValueError(REQUIRED_MESSAGES[name])
    limit = MAX_LENGTHS.get(name)
    if limit is not None and len(value) > limit:
        raise ValueError(f"{name.capitalize()} must be at most {limit} characters")
    return value


def _clean_mode(value: Any) -> EventMode:
    if isinstance(value, EventMode):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(REQUIRED_MESSAGES["mode"])
    try:
        return EventMode(value.strip())
    except ValueError:
        raise ValueError(f"Mode must be one of: {', '.join(EventMode.values())}") from None


def _clean_list(name: str, value: Any) -> tuple[str, ...]:
    if value is None:
        raise ValueError(REQUIRED_MESSAGES[name])
    # A lone string is treated as a one-item list.
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{name.capitalize()} must be a list of text items")

    items: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError(f"{name.capitalize()} must be a list of text items")
        item = item.strip()
        if not item:
            continue
        if name == "tags" and item in items:
            continue
        items.append(item)

    if not items:
        raise ValueError(EMPTY_LIST_MESSAGES[name])
    return tuple(items)
