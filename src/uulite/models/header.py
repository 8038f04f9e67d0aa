"""File header model for the begin/end envelope.

The classic ``uuencode`` utility wraps the encoded body between a
``begin <mode> <name>`` line and an ``end`` line. FileHeader models the
first of these and validates its fields with Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import FramingError

MAX_MODE = 0o7777


class FileHeader(BaseModel):
    """Header line of a framed uuencode file.

    Example:
        >>> header = FileHeader(mode=0o644, name="cat.txt")
        >>> header.to_line()
        'begin 644 cat.txt'
        >>> FileHeader.from_line("begin 600 notes").mode == 0o600
        True

    Attributes:
        mode: Unix permission bits for the decoded file
        name: File name to write the decoded data to
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    mode: int = Field(default=0o644, ge=0, le=MAX_MODE)
    name: str = Field(default="-", min_length=1)

    @field_validator("name")
    @classmethod
    def check_single_line(cls, value: str) -> str:
        if "\n" in value or "\r" in value:
            raise ValueError("name must not contain line breaks")
        return value

    def to_line(self) -> str:
        """Render the header as a ``begin`` line (without newline)."""
        return f"begin {self.mode:o} {self.name}"

    @classmethod
    def from_line(cls, line: str) -> FileHeader:
        """Parse a ``begin <octal mode> <name>`` line.

        Args:
            line: Header line, with or without its line ending

        Returns:
            Parsed header

        Raises:
            FramingError: If the line is not a valid header
        """
        fields = line.rstrip("\r\n").split(" ", 2)
        if len(fields) != 3 or fields[0] != "begin":
            raise FramingError(f"Not a begin line: {line!r}")

        try:
            mode = int(fields[1], 8)
        except ValueError as e:
            raise FramingError(f"Invalid octal mode in begin line: {fields[1]!r}") from e

        try:
            return cls(mode=mode, name=fields[2].rstrip(" \t\f"))
        except ValidationError as e:
            raise FramingError(f"Invalid begin line {line!r}: {e}") from e
