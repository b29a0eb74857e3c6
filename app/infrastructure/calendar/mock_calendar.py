from __future__ import annotations

import logging

from app.application.ports.calendar import CalendarPort
from app.domain.entities.booking import ResolvedBooking


class MockCalendar(CalendarPort):
    """Assigns an event id without reading or writing any calendar."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    async def create_placeholder(self, booking: ResolvedBooking, now_millis: int) -> str:
        event_id = f"event_{now_millis}"
        self._logger.info(
            "Mock calendar event created",
            extra={
                "event_id": event_id,
                "date": booking.date,
                "time": booking.time,
                "service": ", ".join(booking.service_names),
            },
        )
        return event_id
