"""Shared pytest fixtures for tile generator tests."""

from pathlib import Path

import pytest

from tile_types.paths import GeneratorPaths

DEFINITIONS = """g grass burns
d dirt
b bush burns
t tree burns nowalk
w water nowalk
"""

TIMESTAMP = "Sat Oct 17 12:00:00 UTC 2026"


def write_definitions(root: Path, text: str = DEFINITIONS) -> Path:
    """Write ``text`` to the default definitions location under ``root``."""
    path = root / "src" / "types.txt"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def definitions_text():
    return DEFINITIONS


@pytest.fixture
def timestamp():
    return TIMESTAMP


@pytest.fixture
def game_root(tmp_path: Path) -> Path:
    """Temporary root directory holding the round-trip definitions file."""
    write_definitions(tmp_path)
    return tmp_path


@pytest.fixture
def paths(game_root: Path) -> GeneratorPaths:
    return GeneratorPaths(game_root)


@pytest.fixture
def make_definitions():
    """Fixture providing the write_definitions helper function."""
    return write_definitions
