"""Menu containers for config elements."""

from optionkit.menu.manager import ConfigMenu
from optionkit.menu.tab import ConfigTab

__all__ = ["ConfigMenu", "ConfigTab"]
