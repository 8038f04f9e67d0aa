"""uuencode body decoder.

This module provides the decode() function that converts length-prefixed
uuencode lines back to the exact original bytes.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

from ..exceptions import InvalidCharacterError, TruncatedInputError
from ..utils.sizing import decoded_length
from .charmap import decode_char

logger = logging.getLogger(__name__)

EncodedInput = Union[bytes, bytearray, memoryview, str]

_LF = 0x0A
_CR = 0x0D


def decode(text: EncodedInput) -> bytes:
    """Decode uuencoded text back into raw bytes.

    Each line starts with a length character giving the number of raw bytes
    on that line. Data characters are then read in groups of four until that
    many bytes have been produced; bytes past the declared length (the
    encoder's zero padding) are dropped. One newline (or CRLF) separates
    lines, and the last line may omit it. A line declaring zero bytes reads
    no data.

    Args:
        text: Encoded text, as bytes or str

    Returns:
        Decoded bytes

    Raises:
        InvalidCharacterError: If a character is outside the uuencode alphabet
        TruncatedInputError: If a line or the input ends inside a group

    Example:
        >>> decode("#8V%T")
        b'cat'
    """
    codes: Sequence[int] = (
        [ord(ch) for ch in text] if isinstance(text, str) else bytes(text)
    )
    size = len(codes)

    out = bytearray(decoded_length(size))
    written = 0
    pos = 0
    line_index = 0

    while pos < size:
        # Length prefix
        line_length = _decode_unit(codes[pos], line_index, 0)
        pos += 1

        produced = 0
        character = 0
        while produced < line_length:
            units = []
            for i in range(4):
                if pos >= size or codes[pos] in (_LF, _CR):
                    expected = -(-line_length // 3) * 4
                    raise TruncatedInputError(
                        f"Line ends after {character + i} of {expected} data characters "
                        f"(declared length {line_length})",
                        line_index,
                        character + i,
                    )
                units.append(_decode_unit(codes[pos], line_index, character + i))
                pos += 1

            u0, u1, u2, u3 = units
            out[written] = ((u0 << 2) | (u1 >> 4)) & 0xFF
            written += 1
            if produced + 1 < line_length:
                out[written] = ((u1 << 4) | (u2 >> 2)) & 0xFF
                written += 1
            if produced + 2 < line_length:
                out[written] = ((u2 << 6) | u3) & 0xFF
                written += 1

            produced += 3
            character += 4

        # Line separator
        if pos + 1 < size and codes[pos] == _CR and codes[pos + 1] == _LF:
            pos += 2
        elif pos < size and codes[pos] == _LF:
            pos += 1

        line_index += 1

    logger.debug("Decoded %d lines into %d bytes", line_index, written)
    return bytes(out[:written])


def _decode_unit(code: int, line_index: int, character: int) -> int:
    try:
        return decode_char(code)
    except ValueError as e:
        raise InvalidCharacterError(str(e), line_index, character) from e
