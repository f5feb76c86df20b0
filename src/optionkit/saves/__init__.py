"""Save providers for moving config state in and out of a menu."""

from optionkit.saves.base import BaseConfigSaveProvider
from optionkit.saves.provider import ConfigSaveProvider

__all__ = ["BaseConfigSaveProvider", "ConfigSaveProvider"]
