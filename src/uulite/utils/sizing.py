"""Encoded size calculation utilities.

This module provides functions to calculate the size of encoded or decoded
data without actually encoding or decoding it.
"""

from __future__ import annotations

from ..codec.charmap import LINE_BYTES


def line_count(num_bytes: int) -> int:
    """Calculate how many lines encode() produces for num_bytes of data.

    Args:
        num_bytes: Raw data size in bytes

    Returns:
        Number of encoded lines (0 for empty input)

    Raises:
        ValueError: If num_bytes is negative

    Example:
        >>> line_count(45), line_count(46)
        (1, 2)
    """
    _check_size(num_bytes)
    return -(-num_bytes // LINE_BYTES)


def encoded_length(num_bytes: int) -> int:
    """Calculate the exact length of the text encode() produces.

    Each line costs one length character plus four characters per started
    group of three bytes; lines are separated by a single newline.

    Args:
        num_bytes: Raw data size in bytes

    Returns:
        Length of the encoded text in characters

    Example:
        >>> encoded_length(3)
        5
        >>> encoded_length(45)
        61
    """
    lines = line_count(num_bytes)
    if lines == 0:
        return 0

    full_lines, tail = divmod(num_bytes, LINE_BYTES)
    length = full_lines * (1 + LINE_BYTES // 3 * 4)
    if tail:
        length += 1 + -(-tail // 3) * 4
    return length + (lines - 1)


def decoded_length(num_chars: int) -> int:
    """Upper bound on the bytes decodable from num_chars encoded characters.

    Every group of four characters yields at most three bytes, so this bound
    holds regardless of how the characters are split into lines.

    Args:
        num_chars: Encoded text size in characters

    Returns:
        Maximum number of decoded bytes
    """
    _check_size(num_chars)
    return -(-num_chars // 4) * 3


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"Size must be non-negative, got {size}")
