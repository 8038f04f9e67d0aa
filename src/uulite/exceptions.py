"""Exception hierarchy for uulite.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from UuliteError for easy catching of any uulite-specific error.
"""

from __future__ import annotations


class UuliteError(Exception):
    """Base exception for all uulite errors."""

    pass


class CodecError(UuliteError):
    """Raised when encoding or decoding fails at a known position.

    Attributes:
        line: 0-based line index where the fault occurred
        character: 0-based character offset within that line
        message: Description of the fault, including the offending byte
    """

    def __init__(self, message: str, line: int, character: int) -> None:
        self.message = message
        self.line = line
        self.character = character
        super().__init__(message, line, character)

    def __str__(self) -> str:
        return f"{self.message} at line {self.line} character {self.character}"

    def relocated(self, line_offset: int) -> CodecError:
        """Return a copy of this error with its line shifted by line_offset."""
        return type(self)(self.message, self.line + line_offset, self.character)


class InvalidCharacterError(CodecError):
    """Raised when a character or 6-bit unit falls outside the alphabet.

    Examples:
        - A lowercase letter or control byte inside an encoded line
        - A length prefix that is not a printable uuencode character
        - An internal 6-bit unit above 63 during encoding
    """

    pass


class TruncatedInputError(CodecError):
    """Raised when a line ends before its declared payload is complete.

    Examples:
        - Input ends in the middle of a 4-character group
        - A newline appears before the length prefix is satisfied
    """

    pass


class FramingError(UuliteError):
    """Raised when the begin/end file envelope is malformed.

    Examples:
        - No valid ``begin <mode> <name>`` line
        - Missing ``end`` line
        - Invalid octal mode in the header
    """

    pass
