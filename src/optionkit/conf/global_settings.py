"""Default settings for optionkit.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    MENU_TEXT_SAVE = "SAVE"
    MENU_TEXT_APPLY = "APPLY"
"""

# Key settings
RESERVED_KEY_PREFIX = "_"
"""Keys starting with this prefix mark a config value as cosmetic (never saved)."""

COSMETIC_KEY = "_"
"""Sentinel key shared by every cosmetic config value."""

# Menu settings
MENU_TEXT_SAVE = "SAVE ALL"
"""Save control label when there are no pending edits."""

MENU_TEXT_APPLY = "APPLY"
"""Save control label once any config value has changed since the last save."""

# Logging
LOG_LEVEL = "INFO"
"""Default level used by optionkit.helpers.setup_logging()."""
