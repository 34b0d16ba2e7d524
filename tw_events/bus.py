"""Event bus contract and a minimal in-process implementation."""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


class EventBus(Protocol):
    """Anything that can publish an event."""

    def publish(self, event: Any) -> None:
        ...


class InMemoryEventBus:
    """Dispatch events synchronously to subscribed handlers.

    Handlers run in subscription order. A handler that raises stops the
    dispatch and the error reaches the caller of ``publish``.
    """

    def __init__(self) -> None:
        self._handlers: list[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        """Register a handler called for every published event."""
        self._handlers.append(handler)

    def publish(self, event: Any) -> None:
        logger.debug("Dispatching %r to %d handlers", event, len(self._handlers))
        for handler in self._handlers:
            handler(event)
