"""base64-config interfaces package.

This package provides protocol definitions for base64 encoders and for
values convertible to base64 text.
"""

from .encoding import BytesLike, IBase64Encoder, ToBase64

__all__ = [
    "BytesLike",
    "IBase64Encoder",
    "ToBase64",
]
