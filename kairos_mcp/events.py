"""In-process event bus for real-time notifications."""

from __future__ import annotations

import logging
import secrets
import time
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)

EventHandler = Callable[[dict[str, Any]], Any]


def new_event_id() -> str:
    stamp = int(time.time() * 1000)
    return f"evt-{stamp}-{secrets.token_hex(4)}"


class EventBus:
    """Publish/subscribe bus handed to whatever pushes events to clients.

    Built once by the server bootstrap and passed around by reference.
    """

    def __init__(self) -> None:
        self._handlers: list[EventHandler] = []
        self.events_published = 0

    def subscribe(self, handler: EventHandler) -> Callable[[], None]:
        self._handlers.append(handler)

        def _unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return _unsubscribe

    def publish(self, event: dict[str, Any]) -> dict[str, Any]:
        normalized = {
            "id": new_event_id(),
            "timestamp": datetime.now(tz=timezone.utc).replace(microsecond=0).isoformat(),
            **event,
        }
        self.events_published += 1
        for handler in list(self._handlers):
            try:
                handler(normalized)
            except Exception:
                logger.exception("Event handler failed for %s", normalized.get("type"))
        return normalized
