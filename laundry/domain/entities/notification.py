from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    notification_id: str
    title: str
    body: str
    created_at: float
    is_read: bool = False
    order_id: str | None = None
