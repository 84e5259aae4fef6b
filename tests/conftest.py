"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from tonality.core import Interval, Key, Step, Tpc


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def all_tpcs() -> list[Tpc]:
    """Every tonal pitch class, flattest first."""
    return list(Tpc)


@pytest.fixture
def all_keys() -> list[Key]:
    """Every major key signature."""
    return list(Key)


@pytest.fixture
def all_steps() -> list[Step]:
    """The seven staff letters."""
    return list(Step)


@pytest.fixture
def all_intervals() -> list[Interval]:
    """Every representable interval."""
    return list(Interval)
