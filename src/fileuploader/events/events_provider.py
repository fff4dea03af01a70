"""
In-process event bus for session lifecycle notifications.

ONLY handles listener registration and synchronous dispatch.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


class SessionEvent(str, Enum):
    """Session events the delegates react to."""
    LOGIN = "login"
    LOGOUT = "logout"
    SITE_UPDATED = "site_updated"


EventListener = Callable[[Optional[Dict[str, Any]]], Any]


@dataclass
class Subscription:
    """Handle returned by ``EventsProvider.on``."""
    event_name: str
    listener: EventListener
    provider: "EventsProvider"

    def off(self) -> None:
        """Stop receiving the event."""
        self.provider.off(self.event_name, self.listener)


class EventsProvider:
    """
    Synchronous event bus.

    Listeners run in registration order, inside ``trigger``, so state
    changes made by a listener are visible as soon as ``trigger`` returns.
    """

    LOGIN = SessionEvent.LOGIN.value
    LOGOUT = SessionEvent.LOGOUT.value
    SITE_UPDATED = SessionEvent.SITE_UPDATED.value

    def __init__(self):
        self._listeners: Dict[str, List[EventListener]] = defaultdict(list)
        self._logger = logging.getLogger(__name__)

    def on(self, event_name: str, listener: EventListener) -> Subscription:
        """
        Listen to an event.

        Args:
            event_name: Event to listen to
            listener: Callable receiving the event data (may be None)

        Returns:
            Subscription that can be switched off
        """
        self._listeners[event_name].append(listener)
        self._logger.debug(f"Listener added for event '{event_name}'")
        return Subscription(event_name=event_name, listener=listener, provider=self)

    def off(self, event_name: str, listener: EventListener) -> bool:
        """
        Remove a listener.

        Returns:
            True if the listener was found and removed
        """
        listeners = self._listeners.get(event_name, [])
        if listener in listeners:
            listeners.remove(listener)
            return True
        return False

    def trigger(self, event_name: str, data: Optional[Dict[str, Any]] = None) -> int:
        """
        Dispatch an event to its listeners.

        A failing listener is logged and does not prevent the remaining
        listeners from running.

        Returns:
            Number of listeners that ran successfully
        """
        listeners = list(self._listeners.get(event_name, []))
        self._logger.debug(f"Triggering event '{event_name}' for {len(listeners)} listeners")

        succeeded = 0
        for listener in listeners:
            try:
                listener(data)
                succeeded += 1
            except Exception as e:
                self._logger.error(f"Listener for event '{event_name}' failed: {e}", exc_info=True)

        return succeeded

    def listener_count(self, event_name: str) -> int:
        """Number of listeners registered for an event."""
        return len(self._listeners.get(event_name, []))


# Singleton instance
_events_provider: Optional[EventsProvider] = None


def get_events_provider() -> EventsProvider:
    """Get the global events provider instance."""
    global _events_provider
    if _events_provider is None:
        _events_provider = EventsProvider()
    return _events_provider
