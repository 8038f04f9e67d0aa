"""File framing utilities for uulite.

This module wraps encoded bodies in the begin/end envelope used by the
classic uuencode utility, and unwraps them again.
"""

from __future__ import annotations

from .envelope import frame_file, split_envelope, unframe_file

__all__ = [
    "frame_file",
    "unframe_file",
    "split_envelope",
]
