"""uulite: uuencode/uudecode codec

A Python library for the classic uuencode textual encoding: arbitrary binary
data is turned into printable 7-bit lines, each prefixed with the number of
raw bytes it carries, and back again.

Key Features:
- Byte-compatible with ``uuencode -r`` bodies (45 bytes per line)
- Decoder accepts both backtick and space for zero
- Located errors (line and character) for malformed input
- begin/end file envelope with a Pydantic-validated header

Quick Start:
    >>> from uulite import encode, decode
    >>> encode(b"cat")
    '#8V%T'
    >>> decode("#8V%T")
    b'cat'
"""

from __future__ import annotations

from .codec import LINE_BYTES, decode, decode_char, encode, encode_char
from .exceptions import (
    CodecError,
    FramingError,
    InvalidCharacterError,
    TruncatedInputError,
    UuliteError,
)
from .framing import frame_file, unframe_file
from .models import FileHeader
from .utils import decoded_length, encoded_length, line_count

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "encode_char",
    "decode_char",
    "LINE_BYTES",
    # Exceptions
    "UuliteError",
    "CodecError",
    "InvalidCharacterError",
    "TruncatedInputError",
    "FramingError",
    # Framing
    "FileHeader",
    "frame_file",
    "unframe_file",
    # Sizing
    "line_count",
    "encoded_length",
    "decoded_length",
    # Version
    "__version__",
]
