"""Reference base64 encoder.

This module provides a base64 encoder built on the standard library `base64`
module. It honours the same Config values as the core encoder and is used to
cross-check it.
"""

import base64

from base64_config import STANDARD, BytesLike, CharacterSet, Config, IBase64Encoder, Newline


class Base64(IBase64Encoder):
    """Base64 encoder that delegates to the standard library.

    The standard library always emits padded output on a single line, so
    this class post-processes that output: it strips the padding when
    `config.pad` is false and re-wraps the text when `config.line_length` is
    set.
    """

    def encode(self, data: BytesLike, config: Config = STANDARD) -> str:
        """Encode bytes to base64 text following `config`.

        Args:
            data: The bytes to encode.
            config: The format configuration.

        Returns:
            The encoded text.
        """
        if config.char_set is CharacterSet.URL_SAFE:
            # urlsafe_b64encode does the + / to - _ replacement
            encoded = base64.urlsafe_b64encode(data).decode("ascii")
        else:
            encoded = base64.b64encode(data).decode("ascii")

        if not config.pad:
            encoded = encoded.rstrip("=")

        if config.line_length is None or not encoded:
            return encoded

        newline = config.newline.value
        if config.line_length == 0:
            return newline + newline.join(encoded)

        lines = []
        for start in range(0, len(encoded), config.line_length):
            lines.append(encoded[start : start + config.line_length])
        return newline.join(lines)

    @staticmethod
    def encode_mime_lf(data: bytes) -> str:
        """Encode bytes as 76-column, LF-terminated MIME base64.

        Uses `base64.encodebytes`, which also terminates the last line;
        that final newline is removed.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text, lines separated by LF.
        """
        return base64.encodebytes(data).decode("ascii").rstrip(Newline.LF.value)
