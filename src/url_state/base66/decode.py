"""
Base-66 decoding of tokens.

Decoding runs the encoder backwards. Each character is looked up in the
alphabet and folded into an accumulator, most significant first::

    value = 0
    for each character c:
        value = value * 66 + digit(c)

The accumulated integer is then written out as the shortest big-endian byte
buffer. A token whose value is zero (including the empty token) decodes to
an empty buffer, never to a single zero byte.
"""

from __future__ import annotations

from ..exceptions import InvalidCharacterError
from .constants import BASE, DIGIT_VALUES
from .encoding import digits_to_int, int_to_bytes


def _token_digits(token: str) -> list[int]:
    """Map every token character to its digit value, failing on the first stranger."""
    digits: list[int] = []
    for position, char in enumerate(token):
        digit = DIGIT_VALUES.get(char)
        if digit is None:
            raise InvalidCharacterError(char, position)
        digits.append(digit)
    return digits


def decode_bytes(token: str) -> bytes:
    """Decode a base-66 token into a byte buffer.

    Args:
        token: String of alphabet characters. May be empty.

    Returns:
        Minimal big-endian byte buffer for the token's value.

    Raises:
        InvalidCharacterError: If the token contains a character outside
            the alphabet. No partial result is produced.
    """
    # Validate everything before doing any arithmetic.
    #
    # A token with a bad character at the end must fail just like one with a
    # bad character at the start.
    digits = _token_digits(token)
    return int_to_bytes(digits_to_int(digits, BASE))


def is_valid_token(token: str) -> bool:
    """Check whether every character of a string belongs to the alphabet.

    The empty string is a valid token (it encodes zero). This does not
    check that the token decompresses to anything.

    Args:
        token: Candidate token.

    Returns:
        True if :func:`decode_bytes` would accept the string.
    """
    return all(char in DIGIT_VALUES for char in token)
