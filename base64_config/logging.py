"""Logging utilities for base64-config modules."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "base64_config"

# Silent unless the application configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits its configuration from the root logger.

    The library never installs handlers that emit output and never sets a
    level, so records follow whatever the application configures, whether
    that happens before or after this package is imported.

    Args:
        name: Logger name (typically __name__).

    Returns:
        The logger instance.
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
