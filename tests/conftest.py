"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from optionkit.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        RESERVED_KEY_PREFIX="_",
        COSMETIC_KEY="_",
        MENU_TEXT_SAVE="SAVE ALL",
        MENU_TEXT_APPLY="APPLY",
        LOG_LEVEL="INFO",
    )
    yield
    settings.reset()
