"""Exceptions raised by the menu layer.

Config values themselves never raise during normal operation: bad typed input
degrades to a zero value and bad keys make the value cosmetic.
"""


class OptionKitError(Exception):
    """Base exception for optionkit."""


class DuplicateKeyError(OptionKitError):
    """Raised when two non-cosmetic config values in one menu share a key."""

    def __init__(self, key: str) -> None:
        """Initialize with the offending key."""
        self.key = key
        super().__init__(f"Config key '{key}' is already used in this menu")


class DuplicateTabError(OptionKitError):
    """Raised when a menu already has a tab with the same name."""


class UnknownTabError(OptionKitError):
    """Raised when selecting a tab the menu does not have."""


class ForeignContextError(OptionKitError):
    """Raised when an element built for another menu's context joins a menu."""
