"""Configurable base64 encoder.

This module converts byte sequences into base64 text. The alphabet, padding
and line wrapping of the output are taken from a Config value; the encoding
itself is pure and keeps no state between calls, so it is safe to call from
any number of threads at once.
"""

from __future__ import annotations

from typing import Any

from base64_config.config import STANDARD, Config
from base64_config.exceptions import EncodingError
from base64_config.interfaces.encoding import BytesLike, IBase64Encoder, ToBase64
from base64_config.logging import get_logger

logger = get_logger(__name__)

PAD_CHAR = "="


def _as_bytes(data: Any) -> bytes:
    """View any buffer-protocol object as raw bytes."""
    if isinstance(data, bytes):
        return data

    try:
        with memoryview(data) as view:
            return view.tobytes()
    except TypeError as exc:
        raise EncodingError(
            f"cannot encode {type(data).__name__!r} object, a bytes-like object is required"
        ) from exc


def _encode_groups(data: bytes, alphabet: str, pad: bool) -> str:
    """Render 3-byte groups as 4 symbols each, handling the final partial group."""
    out = []
    tail = len(data) % 3
    full = len(data) - tail

    for i in range(0, full, 3):
        n = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
        out.append(alphabet[(n >> 18) & 63])
        out.append(alphabet[(n >> 12) & 63])
        out.append(alphabet[(n >> 6) & 63])
        out.append(alphabet[n & 63])

    if tail == 2:
        n = (data[full] << 16) | (data[full + 1] << 8)
        out.append(alphabet[(n >> 18) & 63])
        out.append(alphabet[(n >> 12) & 63])
        out.append(alphabet[(n >> 6) & 63])
        if pad:
            out.append(PAD_CHAR)
    elif tail == 1:
        n = data[full] << 16
        out.append(alphabet[(n >> 18) & 63])
        out.append(alphabet[(n >> 12) & 63])
        if pad:
            out.append(PAD_CHAR * 2)

    return "".join(out)


def _wrap(text: str, line_length: int, newline: str) -> str:
    """Insert `newline` after every `line_length` characters, never at the end.

    A line length of zero places a break before every character.
    """
    if not text:
        return text

    if line_length == 0:
        return "".join(newline + char for char in text)

    return newline.join(
        text[start : start + line_length] for start in range(0, len(text), line_length)
    )


class Base64Encoder(IBase64Encoder):
    """Encoder that renders bytes as base64 text following a Config.

    The encoder holds no state, so a single instance may be shared freely.
    """

    def encode(self, data: BytesLike, config: Config = STANDARD) -> str:
        """Encode a byte sequence into base64 text.

        The input is split into 3-byte groups, each rendered as four symbols
        from the configured alphabet. A trailing group of one or two bytes is
        rendered as two or three symbols, followed by `=` padding when
        `config.pad` is set. If `config.line_length` is set, the text is then
        broken into lines of that many characters.

        Args:
            data: The bytes to encode. Any object supporting the buffer
                protocol (bytes, bytearray, memoryview, array.array) is accepted.
            config: The format configuration. Defaults to STANDARD.

        Returns:
            The encoded text. Empty input always gives an empty string.

        Raises:
            EncodingError: If `data` does not support the buffer protocol.

        Example:
            >>> Base64Encoder().encode(b"foobar")
            'Zm9vYmFy'
        """
        raw = _as_bytes(data)
        encoded = _encode_groups(raw, config.alphabet, config.pad)

        if config.line_length is not None:
            encoded = _wrap(encoded, config.line_length, config.newline.value)

        logger.debug(
            "encoded %d bytes into %d characters (char_set=%s, pad=%s, line_length=%s)",
            len(raw),
            len(encoded),
            config.char_set.name,
            config.pad,
            config.line_length,
        )
        return encoded


_ENCODER = Base64Encoder()


def encode(data: BytesLike, config: Config = STANDARD) -> str:
    """Encode a byte sequence into base64 text.

    Module-level shortcut for `Base64Encoder().encode`.

    Args:
        data: The bytes to encode.
        config: The format configuration. Defaults to STANDARD.

    Returns:
        The encoded text.
    """
    return _ENCODER.encode(data, config)


def to_base64(value: Any, config: Config = STANDARD) -> str:
    """Convert any byte-sequence-like value to base64 text.

    Values implementing ToBase64 render themselves; anything else is treated
    as a byte sequence and encoded directly.

    Args:
        value: A ToBase64 implementation or a bytes-like object.
        config: The format configuration. Defaults to STANDARD.

    Returns:
        The encoded text.

    Raises:
        EncodingError: If `value` is neither ToBase64 nor bytes-like.
    """
    if isinstance(value, ToBase64):
        return value.to_base64(config)
    return _ENCODER.encode(value, config)


def encoded_length(size: int, config: Config = STANDARD) -> int:
    """Compute the length of the text `encode` produces for `size` input bytes.

    Args:
        size: Number of input bytes.
        config: The format configuration. Defaults to STANDARD.

    Returns:
        The exact number of characters in the encoded output, including
        padding and line-break markers.

    Raises:
        EncodingError: If `size` is not a non-negative int.

    Example:
        >>> encoded_length(4)
        8
    """
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise EncodingError(f"size must be a non-negative int, got {size!r}")

    groups, tail = divmod(size, 3)
    length = groups * 4
    if tail:
        length += 4 if config.pad else tail + 1

    if config.line_length is None or length == 0:
        return length

    if config.line_length == 0:
        breaks = length
    else:
        breaks = (length - 1) // config.line_length

    return length + breaks * len(config.newline.value)
