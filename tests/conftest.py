"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_theory.core.pitch import Pitch
from chuk_mcp_theory.fingerboard import Fingerboard


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def instruments_library_path() -> Path:
    """Path to the built-in instrument library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_theory" / "instruments" / "library"


@pytest.fixture
def ukulele_tuning() -> list[Pitch]:
    """Standard ukulele tuning, first string first."""
    return [Pitch("A", "natural", 4), Pitch("E", "natural", 4), Pitch("C", "natural", 4), Pitch("G", "natural", 4)]


@pytest.fixture
def ukulele(ukulele_tuning: list[Pitch]) -> Fingerboard:
    """Twelve-fret ukulele fingerboard."""
    return Fingerboard(ukulele_tuning, frets=12)
