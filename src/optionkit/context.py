"""Shared menu state passed to every element.

The MenuContext replaces process-wide globals with one explicitly owned object.
A ConfigMenu creates it, hands it to every element at construction, and clears
it on teardown. Its lifetime is the lifetime of the menu.

Every field has a single writer at a time, all on the menu's frame thread:

- held_by: written only through claim_freeze() and release_freeze(), called from
  an element's ``held`` setter.
- config_changed: set by ConfigValue.on_change(), cleared by the menu on save,
  load and discard.
- description: written by whichever element's update() runs last in a frame
  (last writer wins). The host reads it when drawing.

Example usage:
    context = MenuContext()
    slider = ConfigValue((0, 0), (200, 30), "volume", "50", context=context)

    slider.held = True
    assert context.frozen
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from optionkit.events import EventBus

if TYPE_CHECKING:
    from optionkit.elements.base import UIElement

logger = logging.getLogger(__name__)


class MenuContext:
    """Event bus plus shared flags for one config menu.

    Attributes:
        event_bus: Bus used by elements to notify their owning menu.
        held_by: Element currently holding the freeze token, or None.
        config_changed: True while there are edits not yet saved or discarded.
        description: Description text to display this frame.
    """

    def __init__(self, event_bus: EventBus | None = None) -> None:
        """Initialize the context.

        Args:
            event_bus: Bus to share with the owning menu. A new one is created if omitted.
        """
        self.event_bus = event_bus or EventBus()
        self.held_by: UIElement | None = None
        self.config_changed = False
        self.description = ""

    @property
    def frozen(self) -> bool:
        """Whether interaction with everything except the holder is suspended."""
        return self.held_by is not None

    def claim_freeze(self, element: UIElement) -> None:
        """Make ``element`` the holder of the freeze token.

        A new claim replaces any previous holder.
        """
        if self.held_by is not None and self.held_by is not element:
            logger.debug("Freeze token taken over from %r by %r", self.held_by, element)
        self.held_by = element

    def release_freeze(self, element: UIElement) -> bool:
        """Release the freeze token if ``element`` holds it.

        Returns:
            True if the freeze was cleared, False if another element (or nobody) holds it.
        """
        if self.held_by is not element:
            return False
        self.held_by = None
        return True

    def clear(self) -> None:
        """Restore every shared field to its initial state."""
        self.held_by = None
        self.config_changed = False
        self.description = ""
