"""Session lifecycle events."""

from .events_provider import EventsProvider, SessionEvent, Subscription, get_events_provider

__all__ = [
    "EventsProvider",
    "SessionEvent",
    "Subscription",
    "get_events_provider",
]
