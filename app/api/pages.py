from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from app.application.utils.clock import to_iso, utc_now
from app.infrastructure.web.booking_page import BookingPageLoader
from app.wiring.dependencies import get_booking_page_loader

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
@router.get("/booking", response_class=HTMLResponse)
async def booking_page(loader: BookingPageLoader = Depends(get_booking_page_loader)) -> HTMLResponse:
    return HTMLResponse(await loader.load())


@router.get("/health-check")
def health_check() -> dict[str, str]:
    return {"status": "ok", "timestamp": to_iso(utc_now())}
