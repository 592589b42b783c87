"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


class EventMode(Enum):
    """How attendees take part in an event."""

    ONLINE = "online"
    OFFLINE = "offline"
    HYBRID = "hybrid"

    @classmethod
    def values(cls) -> list[str]:
        return [mode.value for mode in cls]


@dataclass(frozen=True)
class Email:
    """Lower-cased email address of the ``local@domain.tld`` shape."""

    value: str

    def __post_init__(self) -> None:
        if not EMAIL_PATTERN.fullmatch(self.value):
            raise ValueError("Please provide a valid email address")
        if self.value != self.value.lower():
            raise ValueError("Email must be lower-case")

    def __str__(self) -> str:
        return self.value
