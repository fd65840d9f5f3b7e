"""Base-66 byte-to-symbol codec.

Converts arbitrary byte buffers to strings over a fixed 66-character,
URL-safe alphabet and back, by reading both as big-endian numerals of the
same integer.

Usage::

    from url_state.base66 import decode_bytes, encode_bytes

    token = encode_bytes(b"Hello")   # "DyTA5oL"
    data = decode_bytes(token)       # b"Hello"

Leading zero bytes do not survive a round trip: ``b"\\x00\\x01"`` and
``b"\\x01"`` both encode to ``"B"``.
"""

from __future__ import annotations

from .constants import ALPHABET, BASE
from .decode import decode_bytes, is_valid_token
from .encode import encode_bytes, max_encoded_length

__all__ = [
    # Alphabet
    "ALPHABET",
    "BASE",
    # Core API
    "encode_bytes",
    "decode_bytes",
    # Utilities
    "is_valid_token",
    "max_encoded_length",
]
