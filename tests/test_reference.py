"""Cross-checks the encoder against the standard library reference encoder."""

from __future__ import annotations

import random

import pytest

from base64_config import (
    MIME,
    STANDARD,
    URL_SAFE,
    Base64Encoder,
    CharacterSet,
    Config,
    IBase64Encoder,
    Newline,
)
from examples.implementation.encoding import Base64

CONFIGS = [
    STANDARD,
    URL_SAFE,
    MIME,
    Config(pad=False),
    Config(char_set=CharacterSet.URL_SAFE, pad=False),
    Config(line_length=0, newline=Newline.LF),
    Config(line_length=1),
    Config(line_length=10, newline=Newline.LF),
    Config(char_set=CharacterSet.URL_SAFE, pad=False, line_length=64),
]


@pytest.fixture
def encoders() -> tuple[IBase64Encoder, IBase64Encoder]:
    """Create the encoder under test and the reference encoder.

    Returns:
        Tuple of (Base64Encoder, reference Base64).
    """
    return Base64Encoder(), Base64()


@pytest.mark.parametrize("config", CONFIGS)
def test_matches_reference(
    encoders: tuple[IBase64Encoder, IBase64Encoder], config: Config
) -> None:
    """Test that both encoders agree for every input length from 0 to 299."""
    encoder, reference = encoders
    rng = random.Random(2045)

    for size in range(300):
        data = rng.randbytes(size)
        assert encoder.encode(data, config) == reference.encode(data, config)


def test_mime_with_lf_matches_encodebytes() -> None:
    """Test 76-column LF output against base64.encodebytes."""
    config = Config(line_length=76, newline=Newline.LF)
    rng = random.Random(76)

    for size in (0, 1, 56, 57, 58, 114, 1000):
        data = rng.randbytes(size)
        assert Base64Encoder().encode(data, config) == Base64.encode_mime_lf(data)
