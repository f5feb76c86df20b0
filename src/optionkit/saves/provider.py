"""Save provider for config values."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from optionkit.saves.base import BaseConfigSaveProvider

if TYPE_CHECKING:
    from optionkit.menu.manager import ConfigMenu

logger = logging.getLogger(__name__)


class ConfigSaveProvider(BaseConfigSaveProvider):
    """Snapshot of every non-cosmetic key/value pair of a menu.

    Restoring uses force_value(), so loading a snapshot never fires change
    hooks or marks the menu dirty.

    Attributes:
        last_restored: Number of keys the last restore() applied to the menu.
    """

    def __init__(self) -> None:
        """Initialize with no snapshot."""
        self._state: dict[str, str] | None = None
        self.last_restored = 0

    @property
    def has_state(self) -> bool:
        """Whether a snapshot has been gathered or loaded."""
        return self._state is not None

    def gather(self, menu: ConfigMenu) -> None:
        """Snapshot the current value of every persisted config value."""
        self._state = {config.key: config.value for config in menu.config_values() if not config.cosmetic}
        logger.debug("Gathered %d config values", len(self._state))

    def restore(self, menu: ConfigMenu) -> bool:
        """Push the snapshot back into the menu's config values.

        Keys in the snapshot that the menu does not know are skipped.
        """
        if self._state is None:
            return False

        by_key = {config.key: config for config in menu.config_values() if not config.cosmetic}
        applied = 0
        for key, value in self._state.items():
            config = by_key.get(key)
            if config is None:
                logger.warning("Ignoring unknown config key: %s", key)
                continue
            config.force_value(value)
            applied += 1

        self.last_restored = applied
        logger.info("Restored %d of %d config values", applied, len(self._state))
        return True

    def to_dict(self) -> dict[str, Any]:
        """Serialize the snapshot."""
        if self._state is None:
            return {}
        return dict(self._state)

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load a snapshot, converting every value to its string form.

        Booleans become "true"/"false", matching ConfigValue.value_bool.
        """
        if data:
            self._state = {
                str(key): ("true" if value else "false") if isinstance(value, bool) else str(value)
                for key, value in data.items()
            }
        else:
            self._state = None

    def clear(self) -> None:
        """Drop the snapshot."""
        self._state = None
