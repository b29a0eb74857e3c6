from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from app.application.ports.notifications import NotificationPort
from app.application.utils.clock import Clock, to_iso, utc_now
from app.core.config import NotificationConfig
from app.domain.entities.notification import DispatchResult, EventType, NotificationEvent

DISABLED_MESSAGE = "MCP integration not enabled"
EVENTS_PATH = "/api/booking-events"


class EventDispatcher(NotificationPort):
    """
    Posts booking events to the external event sink.

    Inert unless the config is enabled and carries both an endpoint and an
    API key. The response status code is not inspected: any body that parses
    as JSON counts as delivered. Transport, serialization and parse errors
    are returned as failed results, never raised.
    """

    def __init__(
        self,
        config: NotificationConfig,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._config = config
        self._transport = transport
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    @property
    def active(self) -> bool:
        return self._config.active

    async def dispatch(self, event_type: EventType, payload: dict[str, Any]) -> DispatchResult:
        try:
            event_type = EventType(event_type)
        except (TypeError, ValueError) as e:
            self._logger.error("Unknown event type", extra={"error": str(e)})
            return DispatchResult(success=False, message=str(e))

        if not self.active:
            self._logger.info(
                "Event sink disabled or not configured, skipping notification",
                extra={"event_type": event_type.value},
            )
            return DispatchResult(success=False, message=DISABLED_MESSAGE)

        try:
            event = NotificationEvent(event_type=event_type, timestamp=to_iso(self._clock()), data=payload)
            body = json.dumps(event.to_wire())
            self._logger.info("Sending notification", extra={"event_type": event_type.value})

            async with httpx.AsyncClient(
                transport=self._transport, timeout=self._config.timeout_seconds
            ) as client:
                response = await client.post(
                    self._url(),
                    content=body,
                    headers={
                        "Content-Type": "application/json",
                        "Authorization": f"Bearer {self._config.api_key}",
                    },
                )
            data = response.json()
        except Exception as e:
            self._logger.error(
                "Error sending notification",
                extra={"event_type": event_type.value, "error": str(e)},
            )
            return DispatchResult(success=False, message=str(e))

        self._logger.info(
            "Notification sent",
            extra={"event_type": event_type.value, "status": response.status_code},
        )
        return DispatchResult(success=True, data=data)

    def _url(self) -> str:
        return f"{(self._config.endpoint or '').rstrip('/')}{EVENTS_PATH}"
