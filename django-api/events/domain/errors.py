"""Domain error codes for the events module."""

from dataclasses import dataclass, field
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_SLUG = "INVALID_SLUG"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DATE = "INVALID_DATE"
    INVALID_TIME = "INVALID_TIME"
    DUPLICATE_SLUG = "DUPLICATE_SLUG"
    DANGLING_REFERENCE = "DANGLING_REFERENCE"
    CONNECTION_FAILURE = "CONNECTION_FAILURE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidArgumentError(DomainError):
    """Raised when caller input has the wrong shape."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_ARGUMENT) -> None:
        super().__init__(code=code, message=message)


class InvalidSlugError(InvalidArgumentError):
    """Raised when a slug is missing, blank or not a string."""

    def __init__(self) -> None:
        super().__init__("Valid slug parameter is required", code=ErrorCode.INVALID_SLUG)


class InvalidEventIdError(InvalidArgumentError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid event ID format", code=ErrorCode.INVALID_EVENT_ID)


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, slug: str | None = None, event_id: str | None = None) -> None:
        if slug is not None:
            message = f"Event with slug '{slug}' not found"
        else:
            message = "Event not found"
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message=message)
        self.slug = slug
        self.event_id = event_id


@dataclass(eq=False)
class RecordValidationError(DomainError):
    """Raised when one or more record fields break the schema.

    ``errors`` maps field names to user-safe messages.
    """

    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def for_fields(cls, errors: dict[str, str]) -> "RecordValidationError":
        return cls(
            code=ErrorCode.VALIDATION_ERROR,
            message="Invalid request data",
            errors=dict(errors),
        )


class InvalidDateError(RecordValidationError):
    """Raised when an event date cannot be parsed as a calendar date."""

    def __init__(self, value: object) -> None:
        message = "Invalid date format. Please provide a valid date."
        super().__init__(code=ErrorCode.INVALID_DATE, message=message, errors={"date": message})
        self.value = value


class InvalidTimeError(RecordValidationError):
    """Raised when an event time is neither HH:MM nor a recognised 12-hour form."""

    def __init__(self, value: object) -> None:
        message = "Invalid time format. Use HH:MM or HH:MM AM/PM format."
        super().__init__(code=ErrorCode.INVALID_TIME, message=message, errors={"time": message})
        self.value = value


class DuplicateSlugError(DomainError):
    """Raised when another event already owns the generated slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_SLUG,
            message=f"An event with slug '{slug}' already exists",
        )
        self.slug = slug


class DanglingReferenceError(DomainError):
    """Raised when a booking references an event that does not exist."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.DANGLING_REFERENCE,
            message=f"Event with ID {event_id} does not exist. Cannot create booking.",
        )
        self.event_id = event_id


class ConnectionFailureError(DomainError):
    """Raised when the data store cannot be reached."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CONNECTION_FAILURE,
            message="Data store is unavailable",
        )
