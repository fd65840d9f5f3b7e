"""
Big-integer primitives for the base-66 codec.

Both directions of the codec are a change of radix. A byte buffer is a
numeral in base 256, a token is a numeral in base 66, and both describe the
same non-negative integer. Python's ``int`` has arbitrary precision, so the
conversion goes through a single integer instead of digit-array long
division.

All numerals here are big-endian: the first digit carries the highest
positional weight, exactly as in ordinary written numbers.

Example: the bytes [0x01, 0x00]

    bytes:  0x01 * 256 + 0x00   = 256
    token:  256 = 3 * 66 + 58
            digit 3  -> 'D'
            digit 58 -> '6'
            -> "D6"

Zero has no digits at all: it is the empty numeral in every radix. This is
what makes leading zero bytes disappear on a round trip.
"""

from __future__ import annotations

from collections.abc import Iterable

from .constants import BYTE_BITS


def bytes_to_int(data: bytes | bytearray | memoryview) -> int:
    """Interpret a byte buffer as a big-endian unsigned integer.

    Args:
        data: Byte buffer of any length. Empty means zero.

    Returns:
        The non-negative integer whose base-256 digits are ``data``.
    """
    return int.from_bytes(data, "big")


def int_to_bytes(value: int) -> bytes:
    """Write an integer as a minimal big-endian byte buffer.

    The buffer never starts with a zero byte. Zero yields ``b""``, not
    ``b"\\x00"``.

    Args:
        value: Non-negative integer.

    Returns:
        The shortest byte buffer whose big-endian value is ``value``.

    Raises:
        ValueError: If value is negative.
    """
    if value < 0:
        raise ValueError(f"Value must be non-negative, got {value}")

    # Round the bit length up to whole bytes.
    #
    # 0 has bit_length 0, which gives a zero-length buffer.
    length = (value.bit_length() + BYTE_BITS - 1) // BYTE_BITS
    return value.to_bytes(length, "big")


def int_to_digits(value: int, base: int) -> list[int]:
    """Split an integer into big-endian digits of the given radix.

    Algorithm:
    1. Take ``value mod base`` as the least significant digit.
    2. Replace value with ``value div base``.
    3. Repeat until value reaches zero, then reverse.

    Args:
        value: Non-negative integer.
        base: Radix, at least 2.

    Returns:
        Digits, most significant first. Zero yields an empty list.

    Raises:
        ValueError: If value is negative or base is below 2.
    """
    if base < 2:
        raise ValueError(f"Base must be at least 2, got {base}")
    if value < 0:
        raise ValueError(f"Value must be non-negative, got {value}")

    digits: list[int] = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(remainder)

    # Remainders come out least significant first.
    digits.reverse()
    return digits


def digits_to_int(digits: Iterable[int], base: int) -> int:
    """Accumulate big-endian digits of the given radix into an integer.

    This is the exact inverse of :func:`int_to_digits`, except that leading
    zero digits are accepted and contribute nothing.

    Args:
        digits: Digits, most significant first.
        base: Radix, at least 2.

    Returns:
        The integer value of the numeral.

    Raises:
        ValueError: If base is below 2 or a digit is outside ``[0, base)``.
    """
    if base < 2:
        raise ValueError(f"Base must be at least 2, got {base}")

    value = 0
    for digit in digits:
        if not 0 <= digit < base:
            raise ValueError(f"Digit {digit} out of range for base {base}")
        value = value * base + digit
    return value

