"""Base class for config save providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from optionkit.menu.manager import ConfigMenu


class BaseConfigSaveProvider(ABC):
    """Abstract base class for config save providers.

    A save provider moves config state between a menu and a plain dictionary.
    Writing that dictionary to disk, and reading it back, is left to the host.

    Example:
        class UpperCaseSaveProvider(BaseConfigSaveProvider):
            def gather(self, menu):
                self._state = {v.key: v.value.upper() for v in menu.config_values()}
            ...
    """

    @abstractmethod
    def gather(self, menu: ConfigMenu) -> None:
        """Gather state from the menu for saving.

        Args:
            menu: Menu whose config values should be collected.
        """

    @abstractmethod
    def restore(self, menu: ConfigMenu) -> bool:
        """Apply gathered or loaded state to the menu.

        Args:
            menu: Menu whose config values should be updated.

        Returns:
            True if state was restored, False if there was nothing to restore.
        """

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialize state for the host's save file.

        Returns:
            Dictionary with serialized state (must be JSON-serializable).
        """

    @abstractmethod
    def from_dict(self, data: dict[str, Any]) -> None:
        """Load state from the host's save file data.

        Args:
            data: Dictionary previously produced by to_dict().
        """

    @abstractmethod
    def clear(self) -> None:
        """Forget any cached state."""
