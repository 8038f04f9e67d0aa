"""Data models for uulite.

This module provides the Pydantic model for the begin/end file header.
"""

from __future__ import annotations

from .header import MAX_MODE, FileHeader

__all__ = [
    "FileHeader",
    "MAX_MODE",
]
