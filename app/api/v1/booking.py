from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.v1.schemas import (
    AvailabilityRequestSchema,
    AvailabilityResponseSchema,
    BookingRequestSchema,
    BookingResponseSchema,
    ErrorResponseSchema,
    SlotSchema,
)
from app.application.use_cases.check_availability import CheckAvailabilityUseCase
from app.application.use_cases.create_booking import BookingOrchestrator
from app.core.config import settings
from app.wiring.dependencies import get_booking_orchestrator, get_check_availability_use_case

router = APIRouter()
logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponseSchema, "description": "Bad request"},
    500: {"model": ErrorResponseSchema, "description": "Server error"},
}


def client_ip(request: Request) -> str:
    return request.headers.get(settings.CLIENT_IP_HEADER) or "unknown"


@router.post(
    "/book",
    response_model=BookingResponseSchema,
    responses=ERROR_RESPONSES,
    summary="Create a new booking",
    description="Creates a new booking and sends confirmation emails",
)
async def create_booking(
    req: BookingRequestSchema,
    request: Request,
    orchestrator: BookingOrchestrator = Depends(get_booking_orchestrator),
):
    try:
        confirmation = await orchestrator.execute(req.to_domain(), client_ip=client_ip(request))
    except Exception as e:
        # Unknown service names land here too and are reported as 500.
        logger.exception("Error creating booking", extra={"error": str(e)})
        return JSONResponse(
            status_code=500,
            content=ErrorResponseSchema(error="Failed to create booking").model_dump(),
        )

    return BookingResponseSchema(
        success=True,
        message="Booking created successfully",
        bookingId=confirmation.booking_id,
    )


@router.post(
    "/availability",
    response_model=AvailabilityResponseSchema,
    responses=ERROR_RESPONSES,
    summary="Check availability for a given date",
    description="Returns available time slots for a specific date",
)
async def check_availability(
    req: AvailabilityRequestSchema,
    request: Request,
    uc: CheckAvailabilityUseCase = Depends(get_check_availability_use_case),
):
    try:
        slots = await uc.execute(req.to_domain(), client_ip=client_ip(request))
    except Exception as e:
        logger.exception("Error checking availability", extra={"error": str(e)})
        return JSONResponse(
            status_code=500,
            content=ErrorResponseSchema(error="Failed to check availability").model_dump(),
        )

    return AvailabilityResponseSchema(
        success=True,
        availableSlots=[SlotSchema(**s.to_payload()) for s in slots],
    )
