from __future__ import annotations

import asyncio
from typing import Any

from app.application.ports.notifications import NotificationPort
from app.application.use_cases.check_availability import CheckAvailabilityUseCase
from app.domain.entities.availability import AvailabilityQuery
from app.domain.entities.notification import DispatchResult, EventType
from fakes import RecordingNotifier, fixed_clock


class BlockingNotifier(NotificationPort):
    def __init__(self) -> None:
        self.release = asyncio.Event()
        self.started = False
        self.finished = False

    async def dispatch(self, event_type: EventType, payload: dict[str, Any]) -> DispatchResult:
        self.started = True
        await self.release.wait()
        self.finished = True
        return DispatchResult(success=True, data={})


def test_returns_before_notification_completes():
    """Test that slots are returned while the notification is still pending."""
    async def scenario():
        notifier = BlockingNotifier()
        uc = CheckAvailabilityUseCase(notifier=notifier)

        slots = await uc.execute(AvailabilityQuery(date="2024-06-03", duration_minutes=60))

        assert len(slots) == 8
        assert notifier.finished is False

        await asyncio.sleep(0)
        assert notifier.started is True
        assert notifier.finished is False

        notifier.release.set()
        for _ in range(3):
            await asyncio.sleep(0)
        assert notifier.finished is True

    asyncio.run(scenario())


def test_failing_notification_does_not_affect_slots():
    """Test that a failing notification leaves the slots intact."""
    async def scenario():
        notifier = RecordingNotifier(fail_with=RuntimeError("sink down"))
        uc = CheckAvailabilityUseCase(notifier=notifier)

        slots = await uc.execute(AvailabilityQuery(date="2024-06-03", duration_minutes=50))
        for _ in range(3):
            await asyncio.sleep(0)

        assert slots[-1].end_time == "17:20"
        assert notifier.event_types == [EventType.availability_check]

    asyncio.run(scenario())


def test_availability_payload():
    """Test that availability_check carries date, duration, timestamp and ip."""
    async def scenario():
        notifier = RecordingNotifier()
        uc = CheckAvailabilityUseCase(notifier=notifier, clock=fixed_clock)

        await uc.execute(AvailabilityQuery(date="2024-06-03", duration_minutes=45), client_ip="198.51.100.4")
        for _ in range(3):
            await asyncio.sleep(0)

        assert notifier.events == [
            (
                EventType.availability_check,
                {
                    "date": "2024-06-03",
                    "duration": 45,
                    "timestamp": "2024-05-20T10:13:20.123Z",
                    "ip": "198.51.100.4",
                },
            )
        ]

    asyncio.run(scenario())
