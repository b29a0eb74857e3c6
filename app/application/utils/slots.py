from __future__ import annotations

import math

from app.domain.entities.availability import AvailabilitySlot

OPEN_HOUR = 9
CLOSE_HOUR = 17
MIN_DURATION_MINUTES = 1


def _format_minutes(minutes: float) -> str:
    hours, mins = divmod(math.floor(minutes), 60)
    return f"{hours:02d}:{mins:02d}"


def generate_slots(
    date: str,
    duration_minutes: float,
    open_hour: int = OPEN_HOUR,
    close_hour: int = CLOSE_HOUR,
) -> list[AvailabilitySlot]:
    """
    Back-to-back candidate windows for a working day.

    A slot is emitted for every start strictly before close_hour. Only the
    start is checked, so when the duration does not divide the working window
    the last slot ends after close_hour (50 minutes -> 16:30-17:20).
    Fractional minutes are floored for display. The date does not change
    the result.
    """
    if duration_minutes < MIN_DURATION_MINUTES:
        raise ValueError(f"duration_minutes must be at least {MIN_DURATION_MINUTES}")

    open_minute = open_hour * 60
    close_minute = close_hour * 60

    slots: list[AvailabilitySlot] = []
    index = 0
    start = open_minute
    while start < close_minute:
        end = start + duration_minutes
        slots.append(AvailabilitySlot(start_time=_format_minutes(start), end_time=_format_minutes(end)))
        index += 1
        start = open_minute + index * duration_minutes
    return slots
