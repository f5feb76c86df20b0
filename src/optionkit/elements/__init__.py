"""Menu elements."""

from optionkit.elements.base import UIElement
from optionkit.elements.config import ConfigValue

__all__ = ["ConfigValue", "UIElement"]
