"""Encoded file analysis CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..codec import LINE_BYTES, decode, decode_char
from ..framing import split_envelope
from ..models import FileHeader


@dataclass
class BodySummary:
    """Line statistics for one encoded body.

    Attributes:
        lines: Number of non-empty lines
        payload_bytes: Decoded size in bytes
        full_lines: Lines carrying the full 45 bytes
        short_lines: Lines carrying 1-44 bytes
        empty_lines: Lines declaring zero bytes (e.g. the "`" terminator)
    """

    lines: int = 0
    payload_bytes: int = 0
    full_lines: int = 0
    short_lines: int = 0
    empty_lines: int = 0


def analyze_text(text: str) -> tuple[Optional[FileHeader], BodySummary]:
    """Decode text and collect line statistics.

    Text containing a line that starts with ``begin `` is treated as a
    framed file; anything else as a raw body.

    Args:
        text: Encoded text

    Returns:
        Tuple of (header or None for a raw body, summary)

    Raises:
        FramingError: If a framed file has no valid envelope
        CodecError: If the body is malformed
    """
    header: Optional[FileHeader] = None
    if any(line.startswith("begin ") for line in text.split("\n")):
        header, body_lines, _ = split_envelope(text)
        data = decode("\n".join(body_lines))
    else:
        data = decode(text)
        body_lines = text.split("\n")

    summary = BodySummary(payload_bytes=len(data))
    for line in body_lines:
        line = line.rstrip("\r")
        if not line:
            continue
        summary.lines += 1
        declared = decode_char(line[0])
        if declared == 0:
            summary.empty_lines += 1
        elif declared >= LINE_BYTES:
            summary.full_lines += 1
        else:
            summary.short_lines += 1

    return header, summary


def analyze_file(file_path: Path) -> None:
    """Analyze an encoded file and print a breakdown of its lines.

    Args:
        file_path: Path to a raw body or a begin/end framed file
    """
    text = file_path.read_bytes().decode("latin-1")
    header, summary = analyze_text(text)

    print("|" * 7, "uulite: uuencode/uudecode codec", "|" * 7)
    print(f"{file_path}: {'framed file' if header is not None else 'raw body'}")
    print()

    if header is not None:
        print(f"{'-' * 27} Header {'-' * 27}")
        print(f"name{'.' * (50 - len(header.name))}{header.name}")
        mode = f"{header.mode:o}"
        print(f"mode{'.' * (50 - len(mode))}{mode}")
        print()

    print(f"{'-' * 28} Body {'-' * 28}")
    rows = [
        ("lines", summary.lines),
        ("full lines", summary.full_lines),
        ("short lines", summary.short_lines),
        ("empty lines", summary.empty_lines),
        ("payload bytes", summary.payload_bytes),
    ]
    for label, value in rows:
        dots = "." * max(1, 54 - len(label) - len(str(value)))
        print(f"{label}{dots}{value}")

    print()
