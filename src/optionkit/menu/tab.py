"""Tabs group the elements of a config menu."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from optionkit.elements.config import ConfigValue
from optionkit.exceptions import DuplicateKeyError

if TYPE_CHECKING:
    from optionkit.elements.base import UIElement
    from optionkit.menu.manager import ConfigMenu

logger = logging.getLogger(__name__)


class ConfigTab:
    """A named page of elements inside a ConfigMenu.

    While an element holds the menu's freeze token, update() only reaches
    that element. Graphical updates keep running for every visible element.

    Attributes:
        name: Tab name, unique within its menu.
        items: Elements in insertion order.
        menu: Owning menu, set by ConfigMenu.add_tab().
    """

    def __init__(self, name: str) -> None:
        """Initialize an empty tab."""
        self.name = name
        self.items: list[UIElement] = []
        self.menu: ConfigMenu | None = None

    def add_items(self, *items: UIElement) -> None:
        """Add elements to the tab.

        Raises:
            DuplicateKeyError: If a non-cosmetic key is already used in the menu
                (or in this tab, when it is not attached to a menu yet).
            ForeignContextError: If the tab is attached and an element was built
                with another menu's context.
        """
        if self.menu:
            for item in items:
                self.menu.check_context(item)

        scope = self.menu.config_values() if self.menu else self.config_values()
        seen = {config.key for config in scope if not config.cosmetic}
        for item in items:
            if isinstance(item, ConfigValue) and not item.cosmetic:
                if item.key in seen:
                    raise DuplicateKeyError(item.key)
                seen.add(item.key)

        self.items.extend(items)
        if self.menu and self.menu.initialized:
            for item in items:
                item.initialize()
        logger.debug("Added %d items to tab %s", len(items), self.name)

    def remove_item(self, item: UIElement) -> None:
        """Remove an element, releasing the freeze if it holds it."""
        self.items.remove(item)
        if isinstance(item, ConfigValue):
            item.held = False
        else:
            item.context.release_freeze(item)

    def config_values(self) -> list[ConfigValue]:
        """All config values of the tab, cosmetic ones included."""
        return [item for item in self.items if isinstance(item, ConfigValue)]

    def initialize(self) -> None:
        """Run the framework init step on every element."""
        for item in self.items:
            item.initialize()

    def reset(self) -> None:
        """Reset every element."""
        for item in self.items:
            item.reset()

    def update(self, dt: float) -> None:
        """Update visible elements, skipping everything but the holder while frozen."""
        for item in self.items:
            if item.hidden:
                continue
            holder = item.context.held_by
            if holder is not None and holder is not item:
                continue
            item.update(dt)

    def graf_update(self, dt: float) -> None:
        """Run graphical updates on every visible element."""
        for item in self.items:
            if not item.hidden:
                item.graf_update(dt)
