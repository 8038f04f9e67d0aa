#!/usr/bin/env python3
"""Framing example for uulite.

Wraps data in the begin/end envelope written by the classic uuencode
utility, then finds and decodes it inside a larger message.
"""

from __future__ import annotations

from uulite import frame_file, unframe_file


def main() -> None:
    """Run the framing example."""
    print("=" * 60)
    print("uulite Framing Example")
    print("=" * 60)
    print()

    payload = bytes(range(64))
    framed = frame_file(payload, name="table.bin", mode=0o600)

    print("1. Framed file:")
    print(framed)

    message = "From: sender@example.com\nSubject: attachment\n\n" + framed
    header, data = unframe_file(message)

    print("2. Unframed from a mail message:")
    print(f"   Name: {header.name}")
    print(f"   Mode: {header.mode:o}")
    print(f"   Round-trip OK: {data == payload}")
    print()


if __name__ == "__main__":
    main()
