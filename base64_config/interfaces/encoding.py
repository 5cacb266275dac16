"""Encoding interfaces for base64-config.

This module defines protocols for base64 encoder objects and for values that
know how to render themselves as base64 text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from base64_config.config import Config

BytesLike = Union[bytes, bytearray, memoryview]
"""Values accepted as encoder input. Any buffer-protocol object works at runtime."""


class IBase64Encoder(Protocol):
    """Interface for base64 encoding operations."""

    def encode(self, data: BytesLike, config: Config) -> str:
        """Encode a byte sequence into base64 text.

        Args:
            data: The bytes to encode. Any object supporting the buffer
                protocol is accepted.
            config: The format configuration to encode with.

        Returns:
            The encoded text.
        """
        ...


@runtime_checkable
class ToBase64(Protocol):
    """Interface for values that can be converted to base64 text."""

    def to_base64(self, config: Config) -> str:
        """Convert this value to base64 text following `config`.

        Args:
            config: The format configuration to encode with.

        Returns:
            The encoded text.
        """
        ...
