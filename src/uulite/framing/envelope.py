"""begin/end file envelope around an encoded body.

This module wraps a raw uuencode body in the framing written by the Unix
``uuencode`` utility and strips it again:

    begin 644 name
    <encoded body lines>
    `
    end
"""

from __future__ import annotations

import logging

from ..codec import decode, encode
from ..codec.charmap import LEGACY_ZERO_CHAR, ZERO_CHAR
from ..exceptions import CodecError, FramingError
from ..models import FileHeader

logger = logging.getLogger(__name__)

END_LINE = "end"
TERMINATOR_LINE = "`"


def frame_file(data: bytes, *, name: str = "-", mode: int = 0o644) -> str:
    """Encode data and wrap it in a begin/end envelope.

    Args:
        data: Raw bytes to encode
        name: File name for the begin line
        mode: Unix permission bits for the begin line

    Returns:
        Framed text, ending with a newline

    Raises:
        ValueError: If name or mode is invalid

    Example:
        >>> print(frame_file(b"cat", name="cat.txt"), end="")
        begin 644 cat.txt
        #8V%T
        `
        end
    """
    header = FileHeader(mode=mode, name=name)
    body = encode(data)

    lines = [header.to_line()]
    if body:
        lines.append(body)
    lines.extend([TERMINATOR_LINE, END_LINE])
    return "\n".join(lines) + "\n"


def unframe_file(text: str | bytes) -> tuple[FileHeader, bytes]:
    """Find a begin/end envelope in text and decode its body.

    Lines before the first line starting with ``begin `` are ignored, so
    mail headers and other preamble may precede the envelope. The body
    ends at the first line declaring zero bytes; lines after it, up to
    ``end``, are ignored.

    Args:
        text: Framed text; bytes are read as Latin-1

    Returns:
        Tuple of (header, decoded data)

    Raises:
        FramingError: If no begin line or no end line is found
        CodecError: If the body is malformed; ``line`` counts from the
            start of text

    Example:
        >>> header, data = unframe_file(frame_file(b"cat", name="cat.txt"))
        >>> header.name, data
        ('cat.txt', b'cat')
    """
    header, body_lines, body_start = split_envelope(text)

    try:
        data = decode("\n".join(body_lines))
    except CodecError as e:
        raise e.relocated(body_start) from e

    return header, data


def split_envelope(text: str | bytes) -> tuple[FileHeader, list[str], int]:
    """Locate the envelope in text without decoding the body.

    Args:
        text: Framed text; bytes are read as Latin-1

    Returns:
        Tuple of (header, body lines without line endings up to and
        including the zero-length terminator, 0-based index of the first
        body line in text)

    Raises:
        FramingError: If no begin line or no end line is found
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")

    lines = [line.rstrip("\r") for line in text.split("\n")]

    for begin_index, line in enumerate(lines):
        if line.startswith("begin "):
            header = FileHeader.from_line(line)
            break
    else:
        raise FramingError("No valid begin line found in input")

    body_start = begin_index + 1
    for end_index in range(body_start, len(lines)):
        if lines[end_index].strip() == END_LINE:
            break
    else:
        raise FramingError(f"Missing '{END_LINE}' line after begin at line {begin_index}")

    body_lines = lines[body_start:end_index]

    # Anything between the zero-length terminator and "end" is ignored
    for i, line in enumerate(body_lines):
        if line[:1] in (ZERO_CHAR, LEGACY_ZERO_CHAR):
            body_lines = body_lines[: i + 1]
            break

    logger.debug(
        "Found %r (mode %o) with %d body lines", header.name, header.mode, len(body_lines)
    )
    return header, body_lines, body_start
