"""Config menu: owner of tabs, shared state and the save control.

The ConfigMenu is the container every config value belongs to. It creates the
MenuContext handed to its elements, listens for their change events to keep
the save control label up to date, and moves values in and out through a
save provider. It never decides when to persist: the host calls save() when
the player confirms, and writes the returned mapping wherever it likes.

Example usage:
    menu = ConfigMenu()
    tab = ConfigTab("Audio")
    tab.add_items(
        ConfigValue((10, 10), (200, 30), "volume", "50", context=menu.context),
        ConfigValue((10, 50), 15.0, "mute", "false", context=menu.context),
    )
    menu.add_tab(tab)
    menu.load(saved_values)
    menu.initialize()

    # Each frame
    menu.update(dt)
    menu.graf_update(dt)

    # On confirm
    values = menu.save()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from optionkit.conf import settings
from optionkit.context import MenuContext
from optionkit.events import ConfigChangedEvent, ConfigDiscardedEvent, ConfigSavedEvent
from optionkit.exceptions import DuplicateKeyError, DuplicateTabError, ForeignContextError, UnknownTabError
from optionkit.saves import ConfigSaveProvider

if TYPE_CHECKING:
    from optionkit.elements.base import UIElement
    from optionkit.elements.config import ConfigValue
    from optionkit.events import EventBus
    from optionkit.menu.tab import ConfigTab
    from optionkit.saves import BaseConfigSaveProvider

logger = logging.getLogger(__name__)


class ConfigMenu:
    """Container of config tabs sharing one save namespace.

    Attributes:
        context: Shared state handed to every element of the menu.
        tabs: Tabs by name, in insertion order.
        active_tab: Tab currently updated each frame.
        save_label: Current text of the save control.
        save_provider: Provider used by save(), load() and discard().
    """

    def __init__(
        self,
        event_bus: EventBus | None = None,
        save_provider: BaseConfigSaveProvider | None = None,
    ) -> None:
        """Initialize an empty menu.

        Args:
            event_bus: Bus to use for element notifications. A new one is created if omitted.
            save_provider: Provider for snapshots. Defaults to ConfigSaveProvider.
        """
        self.context = MenuContext(event_bus)
        self.tabs: dict[str, ConfigTab] = {}
        self.active_tab: ConfigTab | None = None
        self.save_label: str = settings.MENU_TEXT_SAVE
        self.save_provider = save_provider or ConfigSaveProvider()
        self._initialized = False

        self.context.event_bus.subscribe(ConfigChangedEvent, self._on_config_changed)  # type: ignore[arg-type]

    @property
    def initialized(self) -> bool:
        """Whether initialize() has run."""
        return self._initialized

    @property
    def has_unsaved_changes(self) -> bool:
        """Whether any config value changed since the last save, load or discard."""
        return self.context.config_changed

    def add_tab(self, tab: ConfigTab) -> None:
        """Attach a tab to the menu.

        The first tab added becomes the active one.

        Raises:
            DuplicateTabError: If a tab with the same name exists.
            DuplicateKeyError: If the tab reuses a non-cosmetic key of another tab.
            ForeignContextError: If an element of the tab was built with another context.
        """
        if tab.name in self.tabs:
            msg = f"Tab '{tab.name}' already exists"
            raise DuplicateTabError(msg)

        for item in tab.items:
            self.check_context(item)

        seen = {config.key for config in self.config_values() if not config.cosmetic}
        for config in tab.config_values():
            if config.cosmetic:
                continue
            if config.key in seen:
                raise DuplicateKeyError(config.key)
            seen.add(config.key)

        tab.menu = self
        self.tabs[tab.name] = tab
        if self.active_tab is None:
            self.active_tab = tab
        if self._initialized:
            tab.initialize()
        logger.debug("Added tab %s", tab.name)

    def check_context(self, item: UIElement) -> None:
        """Ensure an element shares this menu's context.

        Raises:
            ForeignContextError: If the element was built with another MenuContext.
        """
        if item.context is not self.context:
            msg = f"{item!r} was built with a different menu context"
            raise ForeignContextError(msg)

    def select_tab(self, name: str) -> ConfigTab:
        """Make a tab the active one and clear the description slot.

        Raises:
            UnknownTabError: If the menu has no tab with that name.
        """
        tab = self.tabs.get(name)
        if tab is None:
            msg = f"No tab named '{name}'"
            raise UnknownTabError(msg)
        self.active_tab = tab
        self.context.description = ""
        return tab

    def config_values(self) -> list[ConfigValue]:
        """All config values of all tabs, cosmetic ones included."""
        return [config for tab in self.tabs.values() for config in tab.config_values()]

    def get_config(self, key: str) -> ConfigValue | None:
        """Look up a non-cosmetic config value by key."""
        for config in self.config_values():
            if not config.cosmetic and config.key == key:
                return config
        return None

    def initialize(self) -> None:
        """Run the framework init step on every element.

        From here on, value changes fire change notifications.
        """
        for tab in self.tabs.values():
            tab.initialize()
        self._initialized = True
        logger.info("Config menu initialized with %d tabs", len(self.tabs))

    def update(self, dt: float) -> None:
        """Per-frame update of the active tab."""
        if self.active_tab is not None:
            self.active_tab.update(dt)

    def graf_update(self, dt: float) -> None:
        """Per-frame graphical update of the active tab."""
        if self.active_tab is not None:
            self.active_tab.graf_update(dt)

    def save(self) -> dict[str, str]:
        """Snapshot every non-cosmetic value and mark the menu clean.

        Returns:
            Mapping of key to string value, for the host to persist.
        """
        self.save_provider.gather(self)
        values = self.save_provider.to_dict()
        self._mark_clean()
        self.context.event_bus.publish(ConfigSavedEvent(values))
        logger.info("Saved %d config values", len(values))
        return values

    def load(self, values: dict[str, str]) -> bool:
        """Inject persisted values without firing change notifications.

        Args:
            values: Mapping of key to value, as returned by save().

        Returns:
            True if any values were loaded.
        """
        self.save_provider.from_dict(values)
        restored = self.save_provider.restore(self)
        self._mark_clean()
        return restored

    def discard(self) -> None:
        """Revert pending edits to the last saved or loaded snapshot.

        Values missing from the snapshot, and every cosmetic value, revert to
        their default. Change hooks do not fire.
        """
        snapshot = self.save_provider.to_dict()
        for config in self.config_values():
            if config.cosmetic:
                config.force_value(config.default_value)
            else:
                config.force_value(snapshot.get(config.key, config.default_value))
            config.held = False

        values = {config.key: config.value for config in self.config_values() if not config.cosmetic}
        self._mark_clean()
        self.context.event_bus.publish(ConfigDiscardedEvent(values))
        logger.info("Discarded pending config changes")

    def reset_to_defaults(self) -> None:
        """Reset every element of every tab.

        Initialized values that differ from their defaults notify the menu, so
        the reset shows up as a pending edit.
        """
        for tab in self.tabs.values():
            tab.reset()

    def teardown(self) -> None:
        """Drop tabs, listeners and shared state."""
        self.context.event_bus.clear()
        self.context.clear()
        for tab in self.tabs.values():
            tab.menu = None
        self.tabs.clear()
        self.active_tab = None
        self._initialized = False

    def _mark_clean(self) -> None:
        self.context.config_changed = False
        self.save_label = settings.MENU_TEXT_SAVE

    def _on_config_changed(self, event: ConfigChangedEvent) -> None:
        self.save_label = settings.MENU_TEXT_APPLY
        logger.debug("Config %s changed to %r", event.key, event.value)
