from __future__ import annotations

import logging

from app.application.ports.email import EmailPort
from app.domain.entities.booking import BookingRecord
from app.domain.entities.email import EmailReceipt

CONFIRMATION_SUBJECT = "Booking Confirmation"


class MockEmailService(EmailPort):
    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    async def send_confirmation(self, record: BookingRecord) -> EmailReceipt:
        self._logger.info(
            "Mock confirmation email sent",
            extra={
                "booking_id": record.booking_id,
                "event_id": record.event_id,
                "recipient": record.booking.email,
            },
        )
        return EmailReceipt(recipient=record.booking.email, subject=CONFIRMATION_SUBJECT)
