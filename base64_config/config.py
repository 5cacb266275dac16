"""Format configuration for base64 encoding.

This module defines the character sets, line-break markers and the immutable
Config value that together control how bytes are rendered as base64 text.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from base64_config.exceptions import ConfigurationError

_COMMON_CHARS = string.ascii_uppercase + string.ascii_lowercase + string.digits


class CharacterSet(Enum):
    """Available encoding character sets.

    Both alphabets share their first 62 symbols and differ only in the
    symbols at positions 62 and 63.
    """

    STANDARD = _COMMON_CHARS + "+/"
    """The standard character set (uses `+` and `/`)."""

    URL_SAFE = _COMMON_CHARS + "-_"
    """The URL safe character set (uses `-` and `_`)."""

    @property
    def alphabet(self) -> str:
        """The 64 symbols of this character set, indexed by 6-bit value."""
        return self.value


class Newline(Enum):
    """Line-break markers inserted when wrapping encoded output."""

    LF = "\n"
    CRLF = "\r\n"


@dataclass(frozen=True)
class Config:
    """Configuration parameters for base64 encoding.

    Attributes:
        char_set: Character set to use.
        pad: True to pad output with `=` characters.
        line_length: Maximum characters per line, or None to disable wrapping.
        newline: Marker inserted between lines when wrapping.

    Raises:
        ConfigurationError: If any parameter has the wrong type, or
            line_length is negative.
    """

    char_set: CharacterSet = CharacterSet.STANDARD
    pad: bool = True
    line_length: Optional[int] = None
    newline: Newline = Newline.CRLF

    def __post_init__(self) -> None:
        if not isinstance(self.char_set, CharacterSet):
            raise ConfigurationError(f"invalid character set: {self.char_set!r}")

        if not isinstance(self.pad, bool):
            raise ConfigurationError(f"pad must be a bool, got {self.pad!r}")

        if self.line_length is not None:
            # bool is an int subclass but never a meaningful line length
            if isinstance(self.line_length, bool) or not isinstance(self.line_length, int):
                raise ConfigurationError(
                    f"line_length must be an int or None, got {self.line_length!r}"
                )
            if self.line_length < 0:
                raise ConfigurationError(
                    f"line_length must not be negative, got {self.line_length}"
                )

        if not isinstance(self.newline, Newline):
            raise ConfigurationError(f"invalid newline: {self.newline!r}")

    @property
    def alphabet(self) -> str:
        """Shortcut for the alphabet of the configured character set."""
        return self.char_set.alphabet


STANDARD = Config(char_set=CharacterSet.STANDARD, pad=True, line_length=None)
"""Configuration for RFC 4648 standard base64 encoding."""

URL_SAFE = Config(char_set=CharacterSet.URL_SAFE, pad=True, line_length=None)
"""Configuration for RFC 4648 URL-safe base64 encoding."""

MIME = Config(
    char_set=CharacterSet.STANDARD,
    pad=True,
    line_length=76,
    newline=Newline.CRLF,
)
"""Configuration for RFC 2045 MIME base64 encoding."""
