"""Tests for base-66 encoding and decoding of byte buffers."""

from __future__ import annotations

from urllib.parse import quote

import pytest
from hypothesis import given
from hypothesis import strategies as st

from url_state.base66 import (
    ALPHABET,
    decode_bytes,
    encode_bytes,
    is_valid_token,
    max_encoded_length,
)
from url_state.exceptions import InvalidCharacterError, StateCodecError

# Buffers whose first byte is non-zero survive a round trip exactly.
no_leading_zero = st.binary(max_size=512).filter(lambda data: data[:1] != b"\x00")


class TestEncodeBytes:
    """Tests for byte buffer to token encoding."""

    def test_empty_input(self) -> None:
        """An empty buffer encodes to the empty token."""
        assert encode_bytes(b"") == ""

    def test_all_zero_input(self) -> None:
        """A buffer of zeros has value zero and also encodes to nothing."""
        assert encode_bytes(b"\x00") == ""
        assert encode_bytes(b"\x00" * 16) == ""

    def test_single_digit_values(self) -> None:
        """Values below 66 are a single character."""
        assert encode_bytes(b"\x01") == "B"
        assert encode_bytes(b"\x41") == "~"

    def test_known_vectors(self) -> None:
        """Multi-digit values, most significant digit first."""
        assert encode_bytes(b"\x42") == "BA"
        assert encode_bytes(b"\xff") == "D5"
        assert encode_bytes(b"\x01\x00") == "D6"
        assert encode_bytes(b"Hello") == "DyTA5oL"

    def test_accepts_buffer_types(self) -> None:
        """bytearray and memoryview encode like bytes."""
        assert encode_bytes(bytearray(b"Hello")) == "DyTA5oL"
        assert encode_bytes(memoryview(b"Hello")) == "DyTA5oL"

    def test_no_padding(self) -> None:
        """The first character is never the zero digit."""
        for data in [b"\x01", b"\xff\xff", b"\x00\x00\x07", bytes(range(1, 200))]:
            token = encode_bytes(data)
            assert not token.startswith(ALPHABET[0])

    @given(st.binary(max_size=512))
    def test_alphabet_closure(self, data: bytes) -> None:
        """Every token character comes from the alphabet and needs no escaping."""
        token = encode_bytes(data)
        assert set(token) <= set(ALPHABET)
        assert quote(token, safe="") == token

    @given(st.binary(max_size=512))
    def test_length_bound(self, data: bytes) -> None:
        """Tokens never exceed the computed maximum length."""
        assert len(encode_bytes(data)) <= max_encoded_length(len(data))

    @given(no_leading_zero, no_leading_zero)
    def test_injective(self, first: bytes, second: bytes) -> None:
        """Distinct buffers without leading zeros give distinct tokens."""
        if first != second:
            assert encode_bytes(first) != encode_bytes(second)


class TestDecodeBytes:
    """Tests for token to byte buffer decoding."""

    def test_empty_input(self) -> None:
        """The empty token decodes to an empty buffer."""
        assert decode_bytes("") == b""

    def test_zero_digits(self) -> None:
        """Tokens of only the zero digit decode to an empty buffer, not a zero byte."""
        assert decode_bytes("A") == b""
        assert decode_bytes("AAAA") == b""

    def test_leading_zero_digits_ignored(self) -> None:
        """Leading zero digits do not change the value."""
        assert decode_bytes("AAB") == b"\x01"
        assert decode_bytes("AD5") == b"\xff"

    def test_known_vectors(self) -> None:
        """Decode the vectors used by the encoder tests."""
        assert decode_bytes("B") == b"\x01"
        assert decode_bytes("~") == b"A"
        assert decode_bytes("BA") == b"B"
        assert decode_bytes("D6") == b"\x01\x00"
        assert decode_bytes("DyTA5oL") == b"Hello"

    def test_invalid_character(self) -> None:
        """A character outside the alphabet is reported with its position."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            decode_bytes("abc$def")

        assert exc_info.value.char == "$"
        assert exc_info.value.position == 3
        assert "'$'" in str(exc_info.value)

    def test_first_invalid_character_wins(self) -> None:
        """Only the first offending character is reported."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            decode_bytes("ab%c#d")
        assert exc_info.value.char == "%"
        assert exc_info.value.position == 2

    def test_invalid_character_at_end(self) -> None:
        """A bad trailing character fails the whole token."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            decode_bytes("DyTA5oL=")
        assert exc_info.value.position == 7

    @pytest.mark.parametrize("token", [" ", "abc def", "a+b", "a/b", "é", "\n", "A\x00"])
    def test_rejects_non_alphabet(self, token: str) -> None:
        """Whitespace, reserved URL characters and non-ASCII are rejected."""
        with pytest.raises(InvalidCharacterError):
            decode_bytes(token)

    def test_error_is_codec_error(self) -> None:
        """Callers can catch the shared base class."""
        with pytest.raises(StateCodecError):
            decode_bytes("invalid@string#with$bad%chars")


class TestRoundTrip:
    """Tests for encode followed by decode."""

    def test_hello(self) -> None:
        """The bytes of "Hello" survive a round trip."""
        data = bytes([72, 101, 108, 108, 111])
        assert decode_bytes(encode_bytes(data)) == data

    def test_high_bytes(self) -> None:
        """Buffers made of 0xff bytes survive a round trip."""
        for size in [1, 2, 31, 32, 33, 1000]:
            data = b"\xff" * size
            assert decode_bytes(encode_bytes(data)) == data

    def test_leading_zeros_are_lost(self) -> None:
        """Leading zero bytes are dropped: a known limit of the format."""
        assert decode_bytes(encode_bytes(bytes([0, 0, 1]))) == bytes([1])
        assert decode_bytes(encode_bytes(bytes([0, 255]))) == bytes([255])

    def test_interior_and_trailing_zeros_kept(self) -> None:
        """Only leading zeros are lost."""
        data = b"\x01\x00\x00\x02\x00"
        assert decode_bytes(encode_bytes(data)) == data

    @given(no_leading_zero)
    def test_exact_without_leading_zeros(self, data: bytes) -> None:
        """Buffers without a leading zero byte come back exactly."""
        assert decode_bytes(encode_bytes(data)) == data

    @given(st.binary(max_size=512))
    def test_value_preserved(self, data: bytes) -> None:
        """Any buffer comes back with its leading zeros stripped."""
        assert decode_bytes(encode_bytes(data)) == data.lstrip(b"\x00")


class TestIsValidToken:
    """Tests for the alphabet membership check."""

    def test_valid(self) -> None:
        """Alphabet-only strings are valid, including the empty string."""
        assert is_valid_token("")
        assert is_valid_token("DyTA5oL")
        assert is_valid_token(ALPHABET)

    def test_invalid(self) -> None:
        """Any foreign character makes the token invalid."""
        assert not is_valid_token("abc$def")
        assert not is_valid_token("abc def")
        assert not is_valid_token("%41")


class TestMaxEncodedLength:
    """Tests for the token length upper bound."""

    def test_known_values(self) -> None:
        """66**k must cover 256**n."""
        assert max_encoded_length(0) == 0
        # 256 <= 66**2 = 4356
        assert max_encoded_length(1) == 2
        # 65536 <= 66**3 = 287496
        assert max_encoded_length(2) == 3

    def test_bound_is_reached(self) -> None:
        """An all-0xff buffer uses the full bound for small sizes."""
        assert len(encode_bytes(b"\xff")) == max_encoded_length(1)
        assert len(encode_bytes(b"\xff\xff")) == max_encoded_length(2)

    def test_negative_raises(self) -> None:
        """Negative sizes are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            max_encoded_length(-1)
