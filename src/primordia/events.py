"""Notifications the World sends to whatever host renders it.

Three events exist, each with a dict payload:
- ``UNLOCKED``: ``{"id", "position"}`` when a minigame first appears
- ``LEVEL_UP``: ``{"id", "level"}`` after a minigame is replaced by its successor
- ``ITEM_EMITTED``: ``{"id", "item"}`` for every item a minigame produces
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

LEVEL_UP = "minigame.level_up"
UNLOCKED = "minigame.unlocked"
ITEM_EMITTED = "item.emitted"

Handler = Callable[[Any], None]


class EventBus:
    def __init__(self) -> None:
        self._lock = RLock()
        self._handlers: Dict[str, List[Handler]] = {}

    def subscribe(self, event: str, handler: Handler) -> Callable[[], None]:
        """Register ``handler`` for ``event``; returns a callable that detaches it."""
        with self._lock:
            self._handlers.setdefault(event, []).append(handler)

        def detach() -> None:
            with self._lock:
                handlers = self._handlers.get(event, [])
                if handler in handlers:
                    handlers.remove(handler)

        return detach

    def handler_count(self, event: str) -> int:
        with self._lock:
            return len(self._handlers.get(event, []))

    def emit(self, event: str, payload: Any = None) -> None:
        # Handler failures are logged; remaining handlers still run.
        with self._lock:
            handlers = list(self._handlers.get(event, []))
        logger.debug("%s -> %d handlers: %r", event, len(handlers), payload)
        for handler in handlers:
            try:
                handler(payload)
            except Exception:
                logger.exception("Handler %r failed on %s", handler, event)


__all__ = ["EventBus", "Handler", "LEVEL_UP", "UNLOCKED", "ITEM_EMITTED"]
