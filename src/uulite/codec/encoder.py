"""uuencode body encoder.

This module provides the encode() function that converts raw bytes into
length-prefixed uuencode lines, byte-compatible with ``uuencode -r``.
"""

from __future__ import annotations

import logging

from ..exceptions import InvalidCharacterError
from .charmap import LINE_BYTES, encode_char

logger = logging.getLogger(__name__)


def encode(data: bytes) -> str:
    """Encode raw bytes into uuencoded text.

    The data is split into chunks of 45 bytes. Each chunk becomes one line:
    a length character holding the number of *raw* bytes on the line,
    followed by four characters for every group of three bytes. A short
    final group is padded with zero bytes; the length character tells the
    decoder how many bytes to keep. Lines are joined with ``"\\n"`` and no
    newline follows the last line. Empty input yields an empty string.

    Args:
        data: Raw bytes to encode

    Returns:
        Encoded text

    Raises:
        InvalidCharacterError: If an internal 6-bit unit falls out of range
        TypeError: If data is not bytes-like

    Example:
        >>> encode(b"cat")
        '#8V%T'
    """
    data = memoryview(data).tobytes()
    lines: list[str] = []

    for line_index, start in enumerate(range(0, len(data), LINE_BYTES)):
        chunk = data[start : start + LINE_BYTES]
        lines.append(_encode_line(chunk, line_index))

    logger.debug("Encoded %d bytes into %d lines", len(data), len(lines))
    return "\n".join(lines)


def _encode_line(chunk: bytes, line_index: int) -> str:
    """Encode one chunk of at most 45 bytes into a single line.

    Args:
        chunk: Raw bytes for this line
        line_index: 0-based line number, used for error locations

    Returns:
        Encoded line without a trailing newline

    Raises:
        InvalidCharacterError: If a unit cannot be mapped to a character
    """
    out = [_encode_unit(len(chunk), line_index, 0)]

    for group_start in range(0, len(chunk), 3):
        group = chunk[group_start : group_start + 3].ljust(3, b"\x00")
        b0, b1, b2 = group

        units = (
            (b0 >> 2) & 0x3F,
            ((b0 << 4) | (b1 >> 4)) & 0x3F,
            ((b1 << 2) | (b2 >> 6)) & 0x3F,
            b2 & 0x3F,
        )

        # Offsets count data characters, matching what the decoder reports
        offset = (group_start // 3) * 4
        for i, unit in enumerate(units):
            out.append(_encode_unit(unit, line_index, offset + i))

    return "".join(out)


def _encode_unit(unit: int, line_index: int, character: int) -> str:
    try:
        return encode_char(unit)
    except ValueError as e:
        raise InvalidCharacterError(str(e), line_index, character) from e
