"""Helper functions for hosts embedding optionkit."""

import logging

from rich.logging import RichHandler

from optionkit.conf import settings


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the host application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
        force=True,
    )
