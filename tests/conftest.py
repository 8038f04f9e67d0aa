"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing, including zero bytes."""
    return b"Hello,\x00uuencoded\xffworld!\x00\x00"


@pytest.fixture
def story_text() -> bytes:
    """Multi-kilobyte public-domain text (The Machine Stops, 1909)."""
    excerpt = (DATA_DIR / "the_machine_stops.txt").read_bytes()
    return excerpt * 8
