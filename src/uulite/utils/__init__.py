"""Utility functions for uulite.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import decoded_length, encoded_length, line_count

__all__ = [
    "decoded_length",
    "encoded_length",
    "line_count",
]
