from __future__ import annotations

import logging

import httpx

FALLBACK_HTML = "<h1>Error loading booking page</h1><p>Please try again later.</p>"


class BookingPageLoader:
    def __init__(self, page_url: str, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._page_url = page_url
        self._transport = transport
        self._logger = logging.getLogger(__name__)

    async def load(self) -> str:
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=10.0) as client:
                response = await client.get(self._page_url)
            response.raise_for_status()
            return response.text
        except Exception as e:
            self._logger.error("Error loading booking page", extra={"error": str(e)})
            return FALLBACK_HTML
