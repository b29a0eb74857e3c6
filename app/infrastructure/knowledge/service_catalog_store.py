from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable

from app.application.ports.service_catalog import ServiceCatalogPort
from app.domain.entities.service_catalog import ServiceCatalogEntry
from app.infrastructure.knowledge.service_catalog_data import DEFAULT_SERVICES


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(self, entries: Iterable[ServiceCatalogEntry] | None = None) -> None:
        self._entries = tuple(entries) if entries is not None else DEFAULT_SERVICES
        self._by_name = {entry.name: entry for entry in self._entries}
        if len(self._by_name) != len(self._entries):
            raise ValueError("Service catalog contains duplicate names")

    @classmethod
    def from_config(cls, raw: list[dict[str, Any]] | None) -> "ServiceCatalogStore":
        if not raw:
            return cls()
        entries = [
            ServiceCatalogEntry(
                name=str(item["name"]),
                duration_minutes=int(item["duration"]),
                price=Decimal(str(item["price"])),
            )
            for item in raw
        ]
        return cls(entries)

    def get_service(self, name: str) -> ServiceCatalogEntry | None:
        return self._by_name.get(name)
