"""base64-config Python implementation.

This package provides a configurable base64 encoder: bytes are rendered as
base64 text whose alphabet, padding and line wrapping are controlled by an
immutable Config value.

Main Components:
    - encode / Base64Encoder: Byte sequence to base64 text
    - to_base64 / ToBase64: Conversion for any value that can render itself
    - Config, CharacterSet, Newline: Format parameters
    - STANDARD, URL_SAFE, MIME: Predefined configurations

Example:
    >>> from base64_config import Config, CharacterSet, encode
    >>> encode(b"foob")
    'Zm9vYg=='
    >>> encode(b"\\xfb\\xff", Config(char_set=CharacterSet.URL_SAFE, pad=False))
    '-_8'
"""

from base64_config.config import MIME, STANDARD, URL_SAFE, CharacterSet, Config, Newline
from base64_config.encoder import Base64Encoder, encode, encoded_length, to_base64
from base64_config.exceptions import (
    Base64ConfigError,
    ConfigurationError,
    EncodingError,
)
from base64_config.interfaces import BytesLike, IBase64Encoder, ToBase64

__version__ = "0.1.0"

__all__ = [
    # Encoding
    "Base64Encoder",
    "encode",
    "encoded_length",
    "to_base64",
    # Configuration
    "CharacterSet",
    "Config",
    "Newline",
    "STANDARD",
    "URL_SAFE",
    "MIME",
    # Interfaces
    "BytesLike",
    "IBase64Encoder",
    "ToBase64",
    # Exceptions
    "Base64ConfigError",
    "ConfigurationError",
    "EncodingError",
]
