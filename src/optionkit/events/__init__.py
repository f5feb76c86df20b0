"""Module for events."""

from optionkit.events.base import Event, EventBus
from optionkit.events.config_events import ConfigChangedEvent, ConfigDiscardedEvent, ConfigSavedEvent

__all__ = [
    "ConfigChangedEvent",
    "ConfigDiscardedEvent",
    "ConfigSavedEvent",
    "Event",
    "EventBus",
]
