"""uuencode codec for uulite.

This module provides the character mapping and the full-buffer encoder and
decoder for the length-prefixed uuencode body format.
"""

from __future__ import annotations

from .charmap import LINE_BYTES, decode_char, encode_char
from .decoder import decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "encode_char",
    "decode_char",
    "LINE_BYTES",
]
