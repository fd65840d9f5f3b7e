"""
Compressors used by the state codec.

The state codec treats compression as a black box: bytes in, bytes out, with
``decompress(compress(data)) == data``. Any object with those two methods
works. Two deflate-family containers ship with the package:

  gzip: The default. This is the container the share links have always
        used, so existing tokens keep decoding.
  zlib: A smaller header (2 bytes instead of 10) with an Adler-32 trailer.

Both containers carry a magic header and a checksum. Foreign or damaged
input is therefore detected and reported instead of producing garbage.


DETERMINISM
-----------
A gzip header stores a modification time. Left alone it would change on
every call, and the same text would produce a different token each second.
The time is pinned to zero so that a given text always yields the same
token.
"""

from __future__ import annotations

import gzip
import zlib
from typing import Protocol

from .exceptions import DecompressionError

DEFAULT_COMPRESSION_LEVEL: int = 9
"""Maximum compression. Tokens are short-lived text, so size beats speed."""


class Compressor(Protocol):
    """A reversible byte transform."""

    def compress(self, data: bytes) -> bytes:
        """Compress a byte buffer."""
        ...

    def decompress(self, data: bytes) -> bytes:
        """Restore a buffer produced by :meth:`compress`."""
        ...


def _check_level(level: int) -> int:
    if not 0 <= level <= 9:
        raise ValueError(f"Compression level must be between 0 and 9, got {level}")
    return level


class GzipCompressor:
    """Gzip container with a fixed header timestamp."""

    def __init__(self, level: int = DEFAULT_COMPRESSION_LEVEL) -> None:
        self.level = _check_level(level)

    def __repr__(self) -> str:
        return f"GzipCompressor(level={self.level})"

    def compress(self, data: bytes) -> bytes:
        """Compress data into a single gzip member."""
        return gzip.compress(data, compresslevel=self.level, mtime=0)

    def decompress(self, data: bytes) -> bytes:
        """
        Decompress a gzip stream.

        Raises:
            DecompressionError: If the data is empty, has a bad header, is
                truncated, or fails its CRC check.
        """
        # The gzip module treats an empty buffer as zero members and returns
        # nothing. An empty payload was never produced by compress().
        if not data:
            raise DecompressionError("empty payload")

        try:
            return gzip.decompress(data)
        except (OSError, EOFError, zlib.error) as e:
            raise DecompressionError(f"invalid gzip stream: {e}") from e


class ZlibCompressor:
    """Zlib container."""

    def __init__(self, level: int = DEFAULT_COMPRESSION_LEVEL) -> None:
        self.level = _check_level(level)

    def __repr__(self) -> str:
        return f"ZlibCompressor(level={self.level})"

    def compress(self, data: bytes) -> bytes:
        """Compress data into a zlib stream."""
        return zlib.compress(data, self.level)

    def decompress(self, data: bytes) -> bytes:
        """
        Decompress a zlib stream.

        Raises:
            DecompressionError: If the data is empty, has a bad header, is
                truncated, or fails its checksum.
        """
        if not data:
            raise DecompressionError("empty payload")

        try:
            return zlib.decompress(data)
        except zlib.error as e:
            raise DecompressionError(f"invalid zlib stream: {e}") from e


DEFAULT_COMPRESSOR: Compressor = GzipCompressor()
"""Compressor used when the caller does not supply one."""
