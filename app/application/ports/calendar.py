from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.booking import ResolvedBooking


class CalendarPort(ABC):
    @abstractmethod
    async def create_placeholder(self, booking: ResolvedBooking, now_millis: int) -> str:
        """Reserve a calendar placeholder for the booking. Returns event_id."""
        raise NotImplementedError
