#!/usr/bin/env python3
"""Basic usage example for uulite.

This example demonstrates:
1. Encoding bytes into uuencoded lines
2. Decoding them back
3. Calculating encoded sizes
4. Handling a malformed line
"""

from __future__ import annotations

from uulite import CodecError, decode, encode, encoded_length, line_count


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("uulite Basic Usage Example")
    print("=" * 60)
    print()

    data = b"The quick brown fox jumps over the lazy dog, twice: " * 2

    print("1. Encoding...")
    encoded = encode(data)
    for line in encoded.split("\n"):
        print(f"   {line}")
    print()

    print("2. Sizes...")
    print(f"   Raw: {len(data)} bytes")
    print(f"   Lines: {line_count(len(data))}")
    print(f"   Encoded: {encoded_length(len(data))} characters")
    print()

    print("3. Decoding...")
    decoded = decode(encoded)
    print(f"   Round-trip OK: {decoded == data}")
    print()

    print("4. Malformed input...")
    try:
        decode("#8V%T\n#8v%T")
    except CodecError as e:
        print(f"   {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    main()
