from __future__ import annotations

import logging

from app.application.exceptions import ServiceNotFoundError
from app.application.ports.calendar import CalendarPort
from app.application.ports.email import EmailPort
from app.application.ports.notifications import NotificationPort
from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.utils.best_effort import run_best_effort
from app.application.utils.booking_id import generate_booking_id
from app.application.utils.clock import Clock, to_iso, to_millis, utc_now
from app.domain.entities.booking import (
    BookingConfirmation,
    BookingRecord,
    BookingRequest,
    ResolvedBooking,
)
from app.domain.entities.service_catalog import ServiceCatalogEntry


class BookingOrchestrator:
    """
    Runs one booking request end to end.

    Only service resolution can fail the booking. Calendar, booking and
    email notifications and the confirmation email are best-effort steps:
    each is awaited, its failure logged, and the flow continues.
    """

    def __init__(
        self,
        catalog: ServiceCatalogPort,
        calendar: CalendarPort,
        email: EmailPort,
        notifier: NotificationPort,
        clock: Clock = utc_now,
    ) -> None:
        self._catalog = catalog
        self._calendar = calendar
        self._email = email
        self._notifier = notifier
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, request: BookingRequest, client_ip: str = "unknown") -> BookingConfirmation:
        if not request.agreed:
            raise ValueError("You must agree to the terms")

        services = self._resolve_services(request.service_names)
        booking = ResolvedBooking.from_request(request, services)
        self._logger.info(
            "Creating booking",
            extra={"service": ", ".join(booking.service_names), "client_ip": client_ip},
        )

        record = await self._create_calendar_placeholder(booking)

        booking_id = generate_booking_id(booking.name, to_millis(self._clock()))
        record = record.with_booking_id(booking_id)

        booking_payload = {
            **record.to_payload(),
            "timestamp": to_iso(self._clock()),
            "ip": client_ip,
        }
        await run_best_effort(
            "notify_booking_created",
            lambda: self._notifier.notify_booking_created(booking_payload),
        )

        await self._send_confirmation(record)

        self._logger.info(
            "Booking created",
            extra={"booking_id": booking_id, "event_id": record.event_id},
        )
        return BookingConfirmation(booking_id=booking_id, record=record)

    def _resolve_services(self, names: list[str]) -> list[ServiceCatalogEntry]:
        resolved: list[ServiceCatalogEntry] = []
        for name in names:
            entry = self._catalog.get_service(name)
            if entry is None:
                raise ServiceNotFoundError(name)
            resolved.append(entry)
        return resolved

    async def _create_calendar_placeholder(self, booking: ResolvedBooking) -> BookingRecord:
        event_id = await self._calendar.create_placeholder(booking, to_millis(self._clock()))
        record = BookingRecord(booking=booking, event_id=event_id)

        calendar_payload = {
            "eventId": event_id,
            "date": booking.date,
            "time": booking.time,
            "clientName": booking.name,
            "services": ", ".join(booking.service_names),
        }
        await run_best_effort(
            "notify_calendar_event_created",
            lambda: self._notifier.notify_calendar_event_created(calendar_payload),
        )
        return record

    async def _send_confirmation(self, record: BookingRecord) -> None:
        outcome = await run_best_effort(
            "send_confirmation_email",
            lambda: self._email.send_confirmation(record),
        )
        if not outcome.ok:
            self._logger.error(
                "Failed to send confirmation email",
                extra={"booking_id": record.booking_id, "error": outcome.error},
            )
            return

        receipt = outcome.value
        email_payload = {
            "recipient": receipt.recipient,
            "subject": receipt.subject,
            "timestamp": to_iso(self._clock()),
            "status": receipt.status,
        }
        await run_best_effort(
            "notify_email_sent",
            lambda: self._notifier.notify_email_sent(email_payload),
        )
