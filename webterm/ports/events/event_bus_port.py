"""
Event bus port used to bridge the session with its embedding surface.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

EventHandler = Callable[[Any], None]

ENTITY_USE = "entity.use"
THEME_CHANGED = "theme.changed"


class EventBusPort(ABC):
    """Port interface for publish/subscribe notifications between components."""

    @abstractmethod
    def subscribe(self, topic: str, handler: EventHandler) -> Callable[[], None]:
        """
        Register a handler for a topic.

        Returns:
            A callable that removes the handler
        """
        pass

    @abstractmethod
    def publish(self, topic: str, payload: Any = None) -> None:
        """Deliver a payload to every handler of a topic, in subscription order."""
        pass
