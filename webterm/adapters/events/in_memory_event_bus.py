"""
In-process event bus adapter.
"""

import logging
from collections import defaultdict
from typing import Any, Callable, Optional

from typing_extensions import override

from webterm.ports.events.event_bus_port import EventBusPort, EventHandler


class InMemoryEventBus(EventBusPort):
    """Synchronous publish/subscribe within one process.

    A failing handler is logged and does not prevent delivery to the others.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)
        self._logger = logger or logging.getLogger(__name__)

    @override
    def subscribe(self, topic: str, handler: EventHandler) -> Callable[[], None]:
        self._handlers[topic].append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers[topic]:
                self._handlers[topic].remove(handler)

        return unsubscribe

    @override
    def publish(self, topic: str, payload: Any = None) -> None:
        handlers = list(self._handlers.get(topic, []))
        self._logger.debug(f"Publishing {topic} to {len(handlers)} handler(s)")
        for handler in handlers:
            try:
                handler(payload)
            except Exception as e:
                self._logger.error(f"Handler for {topic} failed: {e}")
