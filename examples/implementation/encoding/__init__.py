"""Encoding reference implementation package.

This package provides a reference base64 encoder built on the standard
library, used to cross-check the base64-config encoder.
"""

from .base64 import Base64

__all__ = [
    "Base64",
]
