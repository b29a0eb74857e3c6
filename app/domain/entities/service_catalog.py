from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class ServiceCatalogEntry:
    name: str
    duration_minutes: int
    price: Decimal

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "duration": self.duration_minutes,
            "price": float(self.price),
        }
