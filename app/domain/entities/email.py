from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EmailReceipt:
    recipient: str
    subject: str
    status: str = "sent"
