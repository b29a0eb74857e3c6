from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class EventType(str, Enum):
    booking_created = "booking_created"
    email_sent = "email_sent"
    calendar_event_created = "calendar_event_created"
    availability_check = "availability_check"


@dataclass(frozen=True)
class NotificationEvent:
    event_type: EventType
    timestamp: str  # ISO-8601
    data: dict[str, Any]

    def to_wire(self) -> dict[str, Any]:
        return {
            "eventType": self.event_type.value,
            "timestamp": self.timestamp,
            "data": self.data,
        }


@dataclass(frozen=True)
class DispatchResult:
    success: bool
    data: Any = None
    message: str | None = None
