"""Configurable values.

Every configurable element of a menu is a ConfigValue: a unique key bound to a
string value with typed int/float/bool views. The owning menu persists the
key/value pairs of every non-cosmetic value.

Change notification is gated on the framework init step so that values can
be assigned freely while a menu is being built::

    context = MenuContext()
    volume = ConfigValue((10, 10), (200, 30), "volume", "50", context=context)
    volume.value_int = 60     # silent, not initialized yet
    volume.initialize()
    volume.value_int = 75     # fires on_change(), marks the menu dirty
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from optionkit.conf import settings
from optionkit.elements.base import UIElement
from optionkit.events import ConfigChangedEvent

if TYPE_CHECKING:
    from arcade.types import Point2

    from optionkit.context import MenuContext

logger = logging.getLogger(__name__)

# Plain ASCII decimal, optional sign and surrounding whitespace
_INT_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


class ConfigValue(UIElement):
    """A keyed, persisted, string-encoded setting.

    A key that is None, empty, or starts with ``settings.RESERVED_KEY_PREFIX``
    makes the value cosmetic: it is stored under ``settings.COSMETIC_KEY`` and
    never saved.

    Attributes:
        key: Unique key within the owning menu (the sentinel for cosmetic values).
        cosmetic: Whether this value is excluded from persistence.
        default_value: Value restored by reset().
        greyed_out: Display flag, does not block programmatic changes.
    """

    def __init__(
        self,
        pos: Point2,
        size: Point2 | float,
        key: str | None,
        default_value: str = "",
        *,
        context: MenuContext,
        description: str = "",
    ) -> None:
        """Create a config value.

        Args:
            pos: Bottom-left position.
            size: (width, height) for a rectangular element, or a radius for a circular one.
            key: Unique key. None, empty or reserved-prefixed keys make the value cosmetic.
            default_value: Initial value, also restored by reset().
            context: Shared state of the owning menu.
            description: Text shown while the element is hovered.
        """
        super().__init__(pos, size, context=context, description=description)
        if not key or key.startswith(settings.RESERVED_KEY_PREFIX):
            self._cosmetic = True
            self._key: str = settings.COSMETIC_KEY
        else:
            self._cosmetic = False
            self._key = key
        self._value = default_value
        self.default_value = default_value
        self.greyed_out = False
        self._held = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r}, value={self._value!r})"

    @property
    def key(self) -> str:
        """Unique key, fixed at construction."""
        return self._key

    @property
    def cosmetic(self) -> bool:
        """Whether this value is never persisted."""
        return self._cosmetic

    @property
    def value(self) -> str:
        """Canonical string value, source of truth for the typed views."""
        return self._value

    @value.setter
    def value(self, new_value: str) -> None:
        if self._value == new_value:
            return
        self._value = new_value
        if self.initialized:
            self.on_change()

    def force_value(self, new_value: str) -> None:
        """Replace the value without change detection or notification.

        Meant for host-driven corrections such as loading persisted values,
        which must not mark the menu dirty.
        """
        self._value = new_value

    @property
    def value_int(self) -> int:
        """Value as an int, 0 unless the value is a plain decimal integer."""
        if not _INT_PATTERN.fullmatch(self._value):
            return 0
        try:
            return int(self._value)
        except ValueError:
            # beyond the interpreter's digit limit
            return 0

    @value_int.setter
    def value_int(self, new_value: int) -> None:
        self.value = str(new_value)

    @property
    def value_float(self) -> float:
        """Value as a float, 0.0 if it does not parse.

        Digit separators and non-ASCII digits are rejected.
        """
        if "_" in self._value or not self._value.isascii():
            return 0.0
        try:
            return float(self._value)
        except ValueError:
            return 0.0

    @value_float.setter
    def value_float(self, new_value: float) -> None:
        self.value = str(new_value)

    @property
    def value_bool(self) -> bool:
        """True only when the value is exactly "true"."""
        return self._value == "true"

    @value_bool.setter
    def value_bool(self, new_value: bool) -> None:
        self.value = "true" if new_value else "false"

    @property
    def held(self) -> bool:
        """Whether this value is being interacted with.

        While held, the menu suspends every other element.
        """
        return self._held

    @held.setter
    def held(self, new_value: bool) -> None:
        if self._held == new_value:
            return
        self._held = new_value
        if new_value:
            self.context.claim_freeze(self)
        elif not self.context.release_freeze(self):
            logger.debug("%r released held but did not own the freeze", self)

    def reset(self) -> None:
        """Restore the default value and release ``held``.

        Goes through the value setter, so an initialized value that differs from
        its default notifies the menu.
        """
        super().reset()
        self.value = self.default_value
        self.held = False

    def on_change(self) -> None:
        """Mark the menu dirty and tell the owning menu about the new value."""
        super().on_change()
        self.context.config_changed = True
        self.context.event_bus.publish(ConfigChangedEvent(self._key, self._value, self._cosmetic))

    def update(self, dt: float) -> None:
        """Per-frame update, a no-op until initialized.

        Publishes the description to the shared slot while it should be shown.
        """
        if not self.initialized:
            return
        super().update(dt)
        if self.show_desc and not self.greyed_out:
            self.context.description = self.description
