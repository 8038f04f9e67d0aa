"""Character-level mapping between 6-bit units and uuencode characters.

Each 6-bit unit (0-63) is written as the printable character ``unit + 32``.
Zero is the exception: it is written as a backtick, while both backtick and
space are accepted when reading, since historical encoders emit either.
"""

from __future__ import annotations

# Raw bytes carried by one full encoded line
LINE_BYTES = 45

ZERO_CHAR = "`"
LEGACY_ZERO_CHAR = " "

_OFFSET = 32
_MAX_UNIT = 63
_ZERO_CODES = (ord(ZERO_CHAR), ord(LEGACY_ZERO_CHAR))


def encode_char(value: int) -> str:
    """Encode a 6-bit value as a uuencode character.

    Args:
        value: Unit to encode (0-63)

    Returns:
        Single printable character (backtick for zero)

    Raises:
        ValueError: If value is outside 0-63

    Example:
        >>> encode_char(0)
        '`'
        >>> encode_char(3)
        '#'
    """
    if value < 0 or value > _MAX_UNIT:
        raise ValueError(f"Value {value} does not fit in 6 bits (max: {_MAX_UNIT})")

    if value == 0:
        return ZERO_CHAR
    return chr(value + _OFFSET)


def decode_char(char: int | str) -> int:
    """Decode a uuencode character into its 6-bit value.

    Args:
        char: Byte value or one-character string

    Returns:
        Unit value (0-63)

    Raises:
        ValueError: If the character is not part of the uuencode alphabet

    Example:
        >>> decode_char("#")
        3
        >>> decode_char(" ") == decode_char("`") == 0
        True
    """
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        code = ord(char)
    else:
        code = char

    if code in _ZERO_CODES:
        return 0
    if code <= _OFFSET or code > _OFFSET + _MAX_UNIT:
        raise ValueError(f"Invalid character in input: {describe_code(code)}")
    return code - _OFFSET


def describe_code(code: int) -> str:
    """Render a character code for error messages, e.g. ``'a' (0x61)``."""
    if 0x20 <= code < 0x7F:
        return f"{chr(code)!r} (0x{code:02X})"
    return f"0x{code:02X}"
