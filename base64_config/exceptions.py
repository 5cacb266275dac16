"""Exception classes for base64-config.

This module defines custom exception types used throughout the base64-config library.
"""


class Base64ConfigError(Exception):
    """Base exception class for all base64-config errors."""

    pass


class ConfigurationError(Base64ConfigError, ValueError):
    """Exception raised when a Config is built from ill-formed parameters."""

    pass


class EncodingError(Base64ConfigError, TypeError):
    """Exception raised when a value cannot be viewed as a byte sequence."""

    pass
