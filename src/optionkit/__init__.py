"""optionkit - configurable values for interactive settings menus.

Each configurable element of a menu is a ConfigValue: a unique key bound to a
string value with typed int/float/bool views. Values notify their menu when
they change so that the menu can track unsaved edits, and a "held" flag lets
one value freeze the rest of the menu while it is being dragged or edited.

Quick start:
    from optionkit import ConfigMenu, ConfigTab, ConfigValue

    menu = ConfigMenu()
    tab = ConfigTab("Audio")
    volume = ConfigValue((10, 10), (200, 30), "volume", "50", context=menu.context)
    tab.add_items(volume)
    menu.add_tab(tab)
    menu.initialize()

    volume.value_int = 75
    assert menu.save_label == "APPLY"
    saved = menu.save()  # {"volume": "75"}
"""

__version__ = "0.1.0"

from optionkit.conf import settings
from optionkit.context import MenuContext
from optionkit.elements import ConfigValue, UIElement
from optionkit.events import ConfigChangedEvent, ConfigDiscardedEvent, ConfigSavedEvent, Event, EventBus
from optionkit.exceptions import (
    DuplicateKeyError,
    DuplicateTabError,
    ForeignContextError,
    OptionKitError,
    UnknownTabError,
)
from optionkit.helpers import setup_logging
from optionkit.menu import ConfigMenu, ConfigTab
from optionkit.saves import BaseConfigSaveProvider, ConfigSaveProvider

__all__ = [
    "BaseConfigSaveProvider",
    "ConfigChangedEvent",
    "ConfigDiscardedEvent",
    "ConfigMenu",
    "ConfigSaveProvider",
    "ConfigSavedEvent",
    "ConfigTab",
    "ConfigValue",
    "DuplicateKeyError",
    "DuplicateTabError",
    "Event",
    "EventBus",
    "ForeignContextError",
    "MenuContext",
    "OptionKitError",
    "UIElement",
    "UnknownTabError",
    "__version__",
    "settings",
    "setup_logging",
]
