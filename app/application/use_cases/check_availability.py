from __future__ import annotations

import logging

from app.application.ports.notifications import NotificationPort
from app.application.utils.best_effort import spawn_detached
from app.application.utils.clock import Clock, to_iso, utc_now
from app.application.utils.slots import CLOSE_HOUR, OPEN_HOUR, generate_slots
from app.domain.entities.availability import AvailabilityQuery, AvailabilitySlot


class CheckAvailabilityUseCase:
    def __init__(
        self,
        notifier: NotificationPort,
        open_hour: int = OPEN_HOUR,
        close_hour: int = CLOSE_HOUR,
        clock: Clock = utc_now,
    ) -> None:
        self._notifier = notifier
        self._open_hour = open_hour
        self._close_hour = close_hour
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, query: AvailabilityQuery, client_ip: str = "unknown") -> list[AvailabilitySlot]:
        """Compute slots; the availability_check notification runs detached and is not awaited."""
        payload = {
            "date": query.date,
            "duration": query.duration_minutes,
            "timestamp": to_iso(self._clock()),
            "ip": client_ip,
        }
        spawn_detached(
            "notify_availability_check",
            lambda: self._notifier.notify_availability_check(payload),
        )

        slots = generate_slots(
            query.date,
            query.duration_minutes,
            open_hour=self._open_hour,
            close_hour=self._close_hour,
        )
        self._logger.info(
            "Availability computed",
            extra={"date": query.date, "slot_count": len(slots), "client_ip": client_ip},
        )
        return slots
