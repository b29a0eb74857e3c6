from __future__ import annotations

from decimal import Decimal

import pytest

from app.core.config import NotificationConfig, Settings
from app.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore


def test_default_catalog():
    """Test that the built-in catalog has the three salon services."""
    catalog = ServiceCatalogStore()

    entry = catalog.get_service("Gesichtsbehandlung")
    assert entry is not None
    assert entry.duration_minutes == 45
    assert entry.price == Decimal("65")
    assert catalog.get_service("Massage").duration_minutes == 60
    assert catalog.get_service("Maniküre").price == Decimal("40")


def test_lookup_is_exact():
    """Test that lookups do not normalize case or whitespace."""
    catalog = ServiceCatalogStore()
    assert catalog.get_service("massage") is None
    assert catalog.get_service(" Massage") is None


def test_catalog_from_config():
    """Test that a configured catalog replaces the built-in one."""
    catalog = ServiceCatalogStore.from_config([{"name": "Pedicure", "duration": 40, "price": "35.50"}])

    entry = catalog.get_service("Pedicure")
    assert entry.price == Decimal("35.50")
    assert catalog.get_service("Massage") is None


def test_duplicate_names_rejected():
    """Test that duplicate names in configuration are refused."""
    with pytest.raises(ValueError):
        ServiceCatalogStore.from_config(
            [{"name": "Massage", "duration": 60, "price": 80}, {"name": "Massage", "duration": 30, "price": 40}]
        )


def test_notification_config_from_settings():
    """Test that the sink is active only with flag, endpoint and key."""
    settings = Settings(MCP_ENABLED=True, MCP_SERVER_URL="https://events.salon.test", MCP_API_KEY="k")
    assert NotificationConfig.from_settings(settings).active is True

    settings = Settings(MCP_ENABLED=True, MCP_SERVER_URL="https://events.salon.test", MCP_API_KEY=None)
    assert NotificationConfig.from_settings(settings).active is False
