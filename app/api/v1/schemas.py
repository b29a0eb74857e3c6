from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field, StrictBool, field_validator

from app.application.utils.slots import MIN_DURATION_MINUTES
from app.domain.entities.availability import AvailabilityQuery
from app.domain.entities.booking import BookingRequest

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$"


class BookingRequestSchema(BaseModel):
    name: str = Field(min_length=2)
    email: EmailStr
    phone: str = Field(min_length=5)
    date: str = Field(pattern=DATE_PATTERN)
    time: str = Field(pattern=TIME_PATTERN)
    services: list[str] = Field(min_length=1)
    notes: str | None = None
    agreed: StrictBool

    @field_validator("agreed")
    @classmethod
    def must_agree(cls, value: bool) -> bool:
        if value is not True:
            raise ValueError("You must agree to the terms")
        return value

    def to_domain(self) -> BookingRequest:
        return BookingRequest(
            name=self.name,
            email=str(self.email),
            phone=self.phone,
            date=self.date,
            time=self.time,
            service_names=list(self.services),
            notes=self.notes,
            agreed=self.agreed,
        )


class BookingResponseSchema(BaseModel):
    success: bool
    message: str
    bookingId: str | None = None


class AvailabilityRequestSchema(BaseModel):
    date: str = Field(pattern=DATE_PATTERN)
    # At least one minute.
    duration: float = Field(default=60, ge=MIN_DURATION_MINUTES, strict=True)

    def to_domain(self) -> AvailabilityQuery:
        return AvailabilityQuery(date=self.date, duration_minutes=self.duration)


class SlotSchema(BaseModel):
    startTime: str
    endTime: str


class AvailabilityResponseSchema(BaseModel):
    success: bool
    availableSlots: list[SlotSchema]


class ErrorResponseSchema(BaseModel):
    success: bool = False
    error: str
