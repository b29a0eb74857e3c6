from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AvailabilitySlot:
    start_time: str  # HH:MM
    end_time: str  # HH:MM

    def to_payload(self) -> dict[str, str]:
        return {"startTime": self.start_time, "endTime": self.end_time}


@dataclass(frozen=True)
class AvailabilityQuery:
    date: str
    duration_minutes: float = 60
