"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_music_theory.core import Pitch


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for project definitions."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def middle_c() -> Pitch:
    """Middle C (C4, MIDI 60)."""
    return Pitch()
