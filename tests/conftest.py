"""Shared pytest fixtures for the stroke_recall test suite.

Fixtures:
    session_db: Path to a fresh SQLite session database
    write_stroke: Helper that writes a stroke to a JSON file

Markers:
    integration: Mark test as integration test
"""

import json
import sys
from pathlib import Path

import pytest

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture
def session_db(tmp_path):
    """Path to an empty session database file."""
    return str(tmp_path / "session.db")


@pytest.fixture
def write_stroke(tmp_path):
    """Return a function that writes points to ``<tmp>/<name>.json``.

    Points are written as ``[[x, y], ...]`` or, with ``as_dicts=True``,
    as ``[{"x": .., "y": ..}, ...]``.
    """
    def _write(name, points, as_dicts=False):
        if as_dicts:
            data = [{'x': x, 'y': y} for x, y in points]
        else:
            data = [[x, y] for x, y in points]
        path = tmp_path / f"{name}.json"
        path.write_text(json.dumps(data))
        return str(path)
    return _write
