"""
Base-66 encoding of byte buffers.

The buffer is read as one big-endian integer and written back out in the
66-character alphabet, most significant digit first::

    bytes  ->  integer  ->  base-66 digits  ->  token
    [72, 101, 108, 108, 111]  ->  310939249775  ->  ...  ->  "DyTA5oL"

No padding, separator or length prefix is added. The token uses the minimal
number of digits, and an all-zero buffer (including the empty buffer)
encodes to the empty string.
"""

from __future__ import annotations

from .constants import ALPHABET, BASE, BYTE_RADIX
from .encoding import bytes_to_int, int_to_digits


def encode_bytes(data: bytes | bytearray | memoryview) -> str:
    """Encode a byte buffer as a base-66 token.

    Leading zero bytes add nothing to the integer value, so they are dropped
    and :func:`decode_bytes` cannot bring them back. Callers that need exact
    byte length must carry it inside the payload.

    Args:
        data: Byte buffer of any length, including empty.

    Returns:
        Token made only of alphabet characters. Empty when the buffer's
        value is zero.
    """
    value = bytes_to_int(data)
    return "".join(ALPHABET[digit] for digit in int_to_digits(value, BASE))


def max_encoded_length(source_length: int) -> int:
    """Return the longest token that a buffer of the given size can produce.

    This is the smallest ``k`` such that ``66**k >= 256**source_length``.
    Every value that fits in ``source_length`` bytes is then strictly below
    ``66**k`` and needs at most ``k`` digits.

    Args:
        source_length: Size of the byte buffer.

    Returns:
        Upper bound on ``len(encode_bytes(data))``.

    Raises:
        ValueError: If source_length is negative.
    """
    if source_length < 0:
        raise ValueError(f"Source length must be non-negative, got {source_length}")

    limit = BYTE_RADIX**source_length
    power = 1
    digits = 0
    while power < limit:
        power *= BASE
        digits += 1
    return digits
