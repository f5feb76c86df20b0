"""Unit tests for settings and logging helpers."""

import logging
import sys
import types
import unittest
from unittest.mock import patch

import pytest
from rich.logging import RichHandler

from optionkit.conf import LazySettings, global_settings, settings
from optionkit.helpers import setup_logging


class TestLazySettings(unittest.TestCase):
    """Test the settings proxy."""

    def test_defaults_come_from_global_settings(self) -> None:
        """Test that unconfigured settings fall back to the defaults."""
        lazy = LazySettings()
        with patch.dict("os.environ", {"OPTIONKIT_SETTINGS_MODULE": "optionkit_missing_settings"}):
            assert lazy.MENU_TEXT_APPLY == global_settings.MENU_TEXT_APPLY
            assert lazy.COSMETIC_KEY == "_"

    def test_user_module_overrides(self) -> None:
        """Test that uppercase names of the user module override defaults."""
        module = types.ModuleType("optionkit_test_settings")
        module.MENU_TEXT_APPLY = "APPLY CHANGES"
        module.lowercase = "ignored"
        lazy = LazySettings()

        with patch.dict(sys.modules, {"optionkit_test_settings": module}), patch.dict(
            "os.environ", {"OPTIONKIT_SETTINGS_MODULE": "optionkit_test_settings"}
        ):
            assert lazy.MENU_TEXT_APPLY == "APPLY CHANGES"
            assert lazy.MENU_TEXT_SAVE == "SAVE ALL"
            assert not hasattr(lazy, "lowercase")

    def test_configure(self) -> None:
        """Test programmatic configuration."""
        settings.configure(MENU_TEXT_SAVE="SAVE")

        assert settings.MENU_TEXT_SAVE == "SAVE"

    def test_reset_drops_overrides(self) -> None:
        """Test that reset() goes back to the defaults on the next read."""
        lazy = LazySettings()
        with patch.dict("os.environ", {"OPTIONKIT_SETTINGS_MODULE": "optionkit_missing_settings"}):
            lazy.configure(MENU_TEXT_SAVE="SAVE")
            lazy.reset()

            assert lazy.MENU_TEXT_SAVE == "SAVE ALL"

    def test_broken_host_module_raises(self) -> None:
        """Test that import errors inside the host module are not hidden."""
        missing_dependency = ModuleNotFoundError("No module named 'nope'", name="nope")
        lazy = LazySettings()

        with patch.dict("os.environ", {"OPTIONKIT_SETTINGS_MODULE": "host_settings"}), patch(
            "optionkit.conf.importlib.import_module", side_effect=missing_dependency
        ), pytest.raises(ModuleNotFoundError):
            _ = lazy.MENU_TEXT_SAVE


class TestSetupLogging(unittest.TestCase):
    """Test the logging helper."""

    def setUp(self) -> None:
        """Remember the root logger level."""
        self.original_level = logging.getLogger().level

    def tearDown(self) -> None:
        """Remove handlers installed by the test."""
        root = logging.getLogger()
        root.setLevel(self.original_level)
        for handler in list(root.handlers):
            if isinstance(handler, RichHandler):
                root.removeHandler(handler)

    def test_installs_rich_handler(self) -> None:
        """Test that the root logger gets a RichHandler at the requested level."""
        setup_logging("debug")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(isinstance(handler, RichHandler) for handler in root.handlers)

    def test_level_defaults_to_settings(self) -> None:
        """Test that the level comes from settings when omitted."""
        settings.configure(LOG_LEVEL="WARNING")

        setup_logging()

        assert logging.getLogger().level == logging.WARNING
