"""
Constants for the base-66 token alphabet.

The alphabet is a wire format. Every token ever issued is a number written
in these digits, so the order below must never change. Reordering,
inserting or removing a character silently re-maps every existing token.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# ===========================================================================
# Alphabet
# ===========================================================================
#
# 66 characters that RFC 3986 lists as "unreserved". None of them is ever
# percent-encoded, so a token can sit in a URL path segment or a query value
# exactly as written.
#
#   Index  0-25:  A-Z
#   Index 26-51:  a-z
#   Index 52-61:  0-9
#   Index 62-65:  - _ . ~

ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.~"
"""Ordered digit characters. A character's index is its digit value."""

BASE: int = len(ALPHABET)
"""Radix of the token numeral system (66)."""

DIGIT_VALUES: Mapping[str, int] = MappingProxyType(
    {char: index for index, char in enumerate(ALPHABET)}
)
"""Read-only reverse lookup from character to digit value."""

# ===========================================================================
# Byte Constants
# ===========================================================================

BYTE_BITS: int = 8
"""Bits per byte in the input buffer."""

BYTE_RADIX: int = 1 << BYTE_BITS
"""Radix of the input buffer viewed as a numeral (256)."""
