"""
State codec: text to URL-safe token and back.

A token is produced by a two-stage pipeline::

    text --UTF-8--> bytes --compress--> bytes --base-66--> token

and restored by running the stages backwards::

    token --base-66--> bytes --decompress--> bytes --UTF-8--> text

The result contains only characters from the base-66 alphabet, so it can
be dropped into a URL path segment or query value without escaping.


FAILURES
--------
Restoring can fail in two places:

  1. The token holds a character outside the alphabet.
     -> InvalidCharacterError

  2. The decoded bytes are not a stream the compressor produced, or the
     restored bytes are not UTF-8 text.
     -> DecompressionError

Both derive from StateCodecError. Neither is retried or swallowed here.
A malformed link is a normal user-facing event, and the caller decides what
to show instead (see :func:`unpack_or_default`).
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from .base66 import decode_bytes, encode_bytes
from .compression import DEFAULT_COMPRESSOR, Compressor
from .exceptions import DecompressionError, StateCodecError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StateCodec:
    """
    Pack and unpack state around a single compressor.

    The codec holds no mutable state. One instance can be shared freely
    across threads.
    """

    compressor: Compressor = field(default=DEFAULT_COMPRESSOR)
    """Byte transform applied between UTF-8 and base-66."""

    def pack_bytes(self, data: bytes) -> str:
        """Compress raw bytes and encode them as a token."""
        return encode_bytes(self.compressor.compress(data))

    def unpack_bytes(self, token: str) -> bytes:
        """
        Decode a token and decompress it to raw bytes.

        Raises:
            InvalidCharacterError: If the token has a non-alphabet character.
            DecompressionError: If the decoded bytes are not a valid stream.
        """
        return self.compressor.decompress(decode_bytes(token))

    def pack(self, text: str) -> str:
        """Turn text into a URL-safe token."""
        return self.pack_bytes(text.encode("utf-8"))

    def unpack(self, token: str) -> str:
        """
        Restore the text behind a token.

        Raises:
            InvalidCharacterError: If the token has a non-alphabet character.
            DecompressionError: If the payload is not a valid stream or is
                not UTF-8 text.
        """
        data = self.unpack_bytes(token)

        # Never substitute replacement characters.
        #
        # Valid tokens always carry UTF-8, so anything else means the token
        # was not produced by pack().
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecompressionError(f"payload is not valid UTF-8: {e}") from e

    def pack_json(self, obj: Any) -> str:
        """Serialize an object as compact JSON and pack it."""
        return self.pack(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))

    def unpack_json(self, token: str) -> Any:
        """
        Unpack a token and parse its payload as JSON.

        Raises:
            InvalidCharacterError: If the token has a non-alphabet character.
            DecompressionError: If the payload is not valid compressed UTF-8
                JSON.
        """
        text = self.unpack(token)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DecompressionError(f"payload is not valid JSON: {e}") from e

    def unpack_or_default(self, token: str, default: str = "") -> str:
        """
        Restore the text behind a token, or return a fallback.

        Meant for consumers such as a page that reads its state from the URL:
        a broken link should load the default state, not fail the request.
        Only codec errors are caught.
        """
        try:
            return self.unpack(token)
        except StateCodecError as e:
            logger.warning("Discarding unreadable state token: %s", e)
            return default


_DEFAULT_CODEC = StateCodec()


def _codec(compressor: Compressor | None) -> StateCodec:
    if compressor is None:
        return _DEFAULT_CODEC
    return StateCodec(compressor)


def pack(text: str, compressor: Compressor | None = None) -> str:
    """Turn text into a URL-safe token.

    The same text always yields the same token.

    Args:
        text: Any string. May be empty.
        compressor: Byte transform to use. Defaults to gzip.

    Returns:
        Token made only of base-66 alphabet characters.
    """
    return _codec(compressor).pack(text)


def unpack(token: str, compressor: Compressor | None = None) -> str:
    """Restore the text behind a token.

    Args:
        token: Token produced by :func:`pack`.
        compressor: The compressor the token was packed with.

    Returns:
        The original text.

    Raises:
        InvalidCharacterError: If the token has a non-alphabet character.
        DecompressionError: If the payload is corrupt, truncated, foreign or
            not UTF-8.
    """
    return _codec(compressor).unpack(token)


def pack_bytes(data: bytes, compressor: Compressor | None = None) -> str:
    """Turn raw bytes into a URL-safe token."""
    return _codec(compressor).pack_bytes(data)


def unpack_bytes(token: str, compressor: Compressor | None = None) -> bytes:
    """Restore the raw bytes behind a token."""
    return _codec(compressor).unpack_bytes(token)


def pack_json(obj: Any, compressor: Compressor | None = None) -> str:
    """Serialize an object as compact JSON and pack it."""
    return _codec(compressor).pack_json(obj)


def unpack_json(token: str, compressor: Compressor | None = None) -> Any:
    """Unpack a token and parse its payload as JSON."""
    return _codec(compressor).unpack_json(token)


def unpack_or_default(
    token: str, default: str = "", compressor: Compressor | None = None
) -> str:
    """Restore the text behind a token, or return ``default`` if it is unreadable."""
    return _codec(compressor).unpack_or_default(token, default)
