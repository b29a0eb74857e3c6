from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.booking import BookingRecord
from app.domain.entities.email import EmailReceipt


class EmailPort(ABC):
    @abstractmethod
    async def send_confirmation(self, record: BookingRecord) -> EmailReceipt:
        """Send the booking confirmation. Raises EmailDeliveryError on failure."""
        raise NotImplementedError
