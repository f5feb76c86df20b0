"""Event system for decoupled menu notifications.

Config values never reach into the menu that owns them. Instead they publish
events on the menu's EventBus, and the menu (or any host code) subscribes to
the event types it cares about.

Example usage:
    bus = EventBus()

    def on_changed(event: ConfigChangedEvent):
        print(f"{event.key} is now {event.value}")

    bus.subscribe(ConfigChangedEvent, on_changed)
    bus.publish(ConfigChangedEvent("volume", "75"))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class Event:
    """Base event class."""


class EventBus:
    """Central event bus for publish/subscribe event handling.

    Handlers are called synchronously, in subscription order, on the thread that
    publishes. This implementation is NOT thread-safe: all calls are expected to
    happen on the menu's frame thread.
    """

    def __init__(self) -> None:
        """Initialize the event bus with no registered listeners."""
        self.listeners: dict[type[Event], list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Subscribe a handler to an event type.

        The same handler can be subscribed multiple times and will be called once
        per subscription.

        Args:
            event_type: The type of event to listen for (e.g., ConfigChangedEvent).
            handler: Callback taking the published event.
        """
        self.listeners.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Remove every subscription of ``handler`` for ``event_type``.

        Unknown handlers are ignored.
        """
        if event_type in self.listeners:
            self.listeners[event_type] = [h for h in self.listeners[event_type] if h != handler]

    def publish(self, event: Event) -> None:
        """Publish an event to all handlers subscribed to its exact type.

        Events nobody listens to are dropped silently. Exceptions raised by a
        handler propagate to the publisher and stop later handlers.
        """
        for handler in list(self.listeners.get(type(event), ())):
            handler(event)

    def clear(self) -> None:
        """Remove all listeners for all event types."""
        self.listeners.clear()

    def unregister_all(self, subscriber: object) -> None:
        """Remove every bound-method handler belonging to ``subscriber``."""
        for event_type in self.listeners:
            self.listeners[event_type] = [
                h for h in self.listeners[event_type] if not (hasattr(h, "__self__") and h.__self__ == subscriber)
            ]
