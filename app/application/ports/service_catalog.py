from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.service_catalog import ServiceCatalogEntry


class ServiceCatalogPort(ABC):
    @abstractmethod
    def get_service(self, name: str) -> ServiceCatalogEntry | None:
        """Get service catalog entry by its exact name."""
        raise NotImplementedError
