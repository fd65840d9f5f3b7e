"""Exception hierarchy for the URL state codec."""

from __future__ import annotations


class StateCodecError(Exception):
    """
    Base exception for all state codec errors.

    A malformed share token is an expected, user-facing condition.
    Callers catch this base class to fall back to a default state.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidCharacterError(StateCodecError):
    """
    Raised when a token contains a character outside the base-66 alphabet.

    Attributes:
        char: The first offending character.
        position: Zero-based index of that character in the token.
    """

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position

        super().__init__(f"Invalid character {char!r} at position {position} in encoded string")


class DecompressionError(StateCodecError):
    """
    Raised when a decoded payload cannot be restored.

    Covers corrupt, truncated or foreign compressed streams, as well as
    decompressed bytes that are not valid UTF-8 (or not valid JSON when
    JSON was requested).

    Attributes:
        detail: Description of what went wrong.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail

        super().__init__(f"Failed to restore state: {detail}")
