"""
Pytest configuration and shared fixtures for the mazepath test suite.
"""

import pytest

from mazepath.core import XorShiftRandom
from mazepath.geometry import MazeGenerator
from mazepath.utils.maze_logging.logger import MazeLogger

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def _quiet_logging():
    """Keep the global logging configuration at its defaults between tests."""
    yield
    MazeLogger.configure(level="WARNING", log_to_file=False, use_colors=False)


# =============================================================================
# Maze Fixtures
# =============================================================================


@pytest.fixture
def rng():
    """Seeded random stream."""
    return XorShiftRandom(12345)


@pytest.fixture
def small_maze():
    """3x3 perfect maze (6x6 physical) without mutation."""
    return MazeGenerator.generate(3, 3, XorShiftRandom(12345), mutation_rate=0)


@pytest.fixture
def mutated_maze():
    """12x8 maze with heavy mutation."""
    return MazeGenerator.generate(12, 8, XorShiftRandom(2024), mutation_rate=4)


@pytest.fixture
def single_cell_maze():
    """1x1 maze: a single PATH cell in a 2x2 physical grid."""
    return MazeGenerator.generate(1, 1, XorShiftRandom(1), mutation_rate=0)
