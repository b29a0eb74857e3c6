from __future__ import annotations

from decimal import Decimal

from app.domain.entities.service_catalog import ServiceCatalogEntry

DEFAULT_SERVICES: tuple[ServiceCatalogEntry, ...] = (
    ServiceCatalogEntry(name="Massage", duration_minutes=60, price=Decimal("80")),
    ServiceCatalogEntry(name="Gesichtsbehandlung", duration_minutes=45, price=Decimal("65")),
    ServiceCatalogEntry(name="Maniküre", duration_minutes=30, price=Decimal("40")),
)
