from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities.notification import DispatchResult, EventType


class NotificationPort(ABC):
    @abstractmethod
    async def dispatch(self, event_type: EventType, payload: dict[str, Any]) -> DispatchResult:
        """Deliver one event. Must never raise; failures are reported in the result."""
        raise NotImplementedError

    async def notify_booking_created(self, booking_data: dict[str, Any]) -> DispatchResult:
        return await self.dispatch(EventType.booking_created, booking_data)

    async def notify_email_sent(self, email_data: dict[str, Any]) -> DispatchResult:
        return await self.dispatch(EventType.email_sent, email_data)

    async def notify_calendar_event_created(self, calendar_data: dict[str, Any]) -> DispatchResult:
        return await self.dispatch(EventType.calendar_event_created, calendar_data)

    async def notify_availability_check(self, availability_data: dict[str, Any]) -> DispatchResult:
        return await self.dispatch(EventType.availability_check, availability_data)
