"""Events published by config values and the config menu."""

from dataclasses import dataclass, field

from optionkit.events.base import Event


@dataclass
class ConfigChangedEvent(Event):
    """Fired when an initialized config value changes through its setter.

    Not fired for force_value() or for changes made before initialization.

    Attributes:
        key: Key of the config value ("_" for cosmetic values).
        value: The new string value.
        cosmetic: Whether the value is excluded from persistence.
    """

    key: str
    value: str
    cosmetic: bool = False


@dataclass
class ConfigSavedEvent(Event):
    """Fired after the menu takes a save snapshot.

    Hosts subscribe to this to write ``values`` to disk.

    Attributes:
        values: Mapping of key to string value for every non-cosmetic config value.
    """

    values: dict[str, str] = field(default_factory=dict)


@dataclass
class ConfigDiscardedEvent(Event):
    """Fired after pending edits are reverted to the last saved snapshot.

    Attributes:
        values: The snapshot the menu reverted to.
    """

    values: dict[str, str] = field(default_factory=dict)
