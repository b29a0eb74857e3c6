from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from app.domain.entities.service_catalog import ServiceCatalogEntry


@dataclass(frozen=True)
class BookingRequest:
    name: str
    email: str
    phone: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM, 24h
    service_names: list[str] = field(default_factory=list)
    notes: str | None = None
    agreed: bool = False


@dataclass(frozen=True)
class ResolvedBooking:
    name: str
    email: str
    phone: str
    date: str
    time: str
    services: tuple[ServiceCatalogEntry, ...]
    notes: str | None = None
    agreed: bool = False

    @classmethod
    def from_request(
        cls, request: BookingRequest, services: list[ServiceCatalogEntry]
    ) -> "ResolvedBooking":
        return cls(
            name=request.name,
            email=request.email,
            phone=request.phone,
            date=request.date,
            time=request.time,
            services=tuple(services),
            notes=request.notes,
            agreed=request.agreed,
        )

    @property
    def service_names(self) -> list[str]:
        return [s.name for s in self.services]


@dataclass(frozen=True)
class BookingRecord:
    booking: ResolvedBooking
    event_id: str
    booking_id: str | None = None

    def with_booking_id(self, booking_id: str) -> "BookingRecord":
        return replace(self, booking_id=booking_id)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.booking.name,
            "email": self.booking.email,
            "phone": self.booking.phone,
            "date": self.booking.date,
            "time": self.booking.time,
            "services": [s.to_payload() for s in self.booking.services],
            "notes": self.booking.notes,
            "agreed": self.booking.agreed,
            "eventId": self.event_id,
        }
        if self.booking_id:
            payload["bookingId"] = self.booking_id
        return payload


@dataclass(frozen=True)
class BookingConfirmation:
    booking_id: str
    record: BookingRecord
