"""URL-safe state tokens.

Packs arbitrary text (usually a serialized config document) into a short
token that can be placed directly in a URL path segment, and restores it.

Usage::

    from url_state import pack, unpack

    token = pack('{"a":1,"b":[1,2,3]}')
    text = unpack(token)

Tokens are gzip-compressed UTF-8, written as a base-66 numeral over the
alphabet ``A-Z a-z 0-9 - _ . ~``.
"""

from __future__ import annotations

from .base66 import ALPHABET, BASE, decode_bytes, encode_bytes, is_valid_token
from .compression import Compressor, GzipCompressor, ZlibCompressor
from .exceptions import DecompressionError, InvalidCharacterError, StateCodecError
from .share import ShareLink, build_share_link, preview, share_url, token_from_url
from .state import (
    StateCodec,
    pack,
    pack_bytes,
    pack_json,
    unpack,
    unpack_bytes,
    unpack_json,
    unpack_or_default,
)

__all__ = [
    # State codec
    "pack",
    "unpack",
    "pack_bytes",
    "unpack_bytes",
    "pack_json",
    "unpack_json",
    "unpack_or_default",
    "StateCodec",
    # Byte-to-symbol codec
    "ALPHABET",
    "BASE",
    "encode_bytes",
    "decode_bytes",
    "is_valid_token",
    # Compressors
    "Compressor",
    "GzipCompressor",
    "ZlibCompressor",
    # Share links
    "ShareLink",
    "build_share_link",
    "share_url",
    "token_from_url",
    "preview",
    # Exceptions
    "StateCodecError",
    "InvalidCharacterError",
    "DecompressionError",
]
