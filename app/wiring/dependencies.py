from __future__ import annotations

from app.application.ports.calendar import CalendarPort
from app.application.ports.email import EmailPort
from app.application.ports.notifications import NotificationPort
from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.use_cases.check_availability import CheckAvailabilityUseCase
from app.application.use_cases.create_booking import BookingOrchestrator
from app.core.config import NotificationConfig, settings
from app.infrastructure.calendar.mock_calendar import MockCalendar
from app.infrastructure.email.mock_email import MockEmailService
from app.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore
from app.infrastructure.notifications.event_dispatcher import EventDispatcher
from app.infrastructure.web.booking_page import BookingPageLoader


def get_notification_config() -> NotificationConfig:
    return NotificationConfig.from_settings(settings)


def get_notifier() -> NotificationPort:
    # Built per request from an immutable config value.
    return EventDispatcher(config=get_notification_config())


def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore.from_config(settings.SERVICE_CATALOG)


def get_calendar() -> CalendarPort:
    return MockCalendar()


def get_email_service() -> EmailPort:
    return MockEmailService()


def get_booking_orchestrator() -> BookingOrchestrator:
    return BookingOrchestrator(
        catalog=get_service_catalog(),
        calendar=get_calendar(),
        email=get_email_service(),
        notifier=get_notifier(),
    )


def get_check_availability_use_case() -> CheckAvailabilityUseCase:
    return CheckAvailabilityUseCase(
        notifier=get_notifier(),
        open_hour=settings.BUSINESS_OPEN_HOUR,
        close_hour=settings.BUSINESS_CLOSE_HOUR,
    )


def get_booking_page_loader() -> BookingPageLoader:
    return BookingPageLoader(page_url=settings.BOOKING_PAGE_URL)
