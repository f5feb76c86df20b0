"""Settings for optionkit.

Defaults live in optionkit.conf.global_settings. A host overrides them with
uppercase names in its own settings module, named by the
OPTIONKIT_SETTINGS_MODULE environment variable (``settings`` by default)::

    # settings.py
    MENU_TEXT_APPLY = "APPLY CHANGES"

    # host code
    from optionkit.conf import settings

    print(settings.MENU_TEXT_APPLY)  # "APPLY CHANGES"

Nothing is imported until the first setting is read.
"""

import importlib
import logging
import os
from types import ModuleType
from typing import Any

from optionkit.conf import global_settings

ENVIRONMENT_VARIABLE = "OPTIONKIT_SETTINGS_MODULE"

logger = logging.getLogger(__name__)


class Settings:
    """Defaults from global_settings, overridden by an optional host module."""

    def __init__(self, module_name: str | None = None) -> None:
        """Load defaults, then the host module if it can be imported.

        Args:
            module_name: Dotted name of the host settings module.

        Raises:
            ImportError: If the host module exists but fails to import.
        """
        self._apply(global_settings)
        if not module_name:
            return
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            if exc.name != module_name:
                raise
            logger.debug("No settings module %s, using defaults", module_name)
        else:
            self._apply(module)

    def _apply(self, module: ModuleType) -> None:
        for name in dir(module):
            if name.isupper():
                setattr(self, name, getattr(module, name))


class LazySettings:
    """Proxy that builds a Settings instance on first use."""

    _wrapped: Settings | None

    def __init__(self) -> None:
        """Create an unloaded proxy."""
        object.__setattr__(self, "_wrapped", None)

    def _load(self) -> Settings:
        if self._wrapped is None:
            object.__setattr__(self, "_wrapped", Settings(os.environ.get(ENVIRONMENT_VARIABLE, "settings")))
        return self._wrapped

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Read a setting, loading settings if needed."""
        return getattr(self._load(), name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Override a single setting."""
        setattr(self._load(), name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Override several settings at once (useful for testing).

        Example:
            settings.configure(MENU_TEXT_APPLY="APPLY")
        """
        wrapped = self._load()
        for name, value in options.items():
            setattr(wrapped, name, value)

    def reset(self) -> None:
        """Drop loaded settings so the next read starts from scratch."""
        object.__setattr__(self, "_wrapped", None)


# Global singleton instance
settings = LazySettings()

__all__ = ["ENVIRONMENT_VARIABLE", "LazySettings", "Settings", "global_settings", "settings"]
