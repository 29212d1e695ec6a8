"""Pytest configuration and shared fixtures for route calculation tests."""

from __future__ import annotations

import sys
from pathlib import Path

import matplotlib
import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Charts are only ever saved to files in tests
matplotlib.use("Agg")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (exercise packaged data and file output)",
    )


@pytest.fixture(scope="session")
def package_data_directory() -> Path:
    """Return path to package data directory with waypoint files."""
    return Path(__file__).parent.parent / "src" / "route_calc" / "data"
