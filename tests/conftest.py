"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tablets.registry import Registry
from tablets.tablet import Tablet
from tests.fixtures import (
    SAMPLE_OWNERSHIP_TABLET,
    SAMPLE_STRINGS_TABLET,
    SAMPLE_FOO_TABLET,
    SAMPLE_DEGENERATE_TABLET,
    write_tablet,
    write_registry_dir,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Tablet File Fixtures
# ============================================================================


@pytest.fixture
def ownership_file(tmp_path):
    """A tablet with three shards."""
    return write_tablet(tmp_path, "ownership.rs", SAMPLE_OWNERSHIP_TABLET)


@pytest.fixture
def strings_file(tmp_path):
    """A tablet without separators."""
    return write_tablet(tmp_path, "strings.rs", SAMPLE_STRINGS_TABLET)


@pytest.fixture
def foo_file(tmp_path):
    """The three-line tablet: intro, separator, body."""
    return write_tablet(tmp_path, "foo.rs", SAMPLE_FOO_TABLET)


@pytest.fixture
def degenerate_file(tmp_path):
    """A tablet with leading, trailing and adjacent separators."""
    return write_tablet(tmp_path, "degenerate.rs", SAMPLE_DEGENERATE_TABLET)


@pytest.fixture
def missing_file(tmp_path):
    """A path that does not exist."""
    return tmp_path / "missing.rs"


# ============================================================================
# Tablet / Registry Fixtures
# ============================================================================


@pytest.fixture
def ownership_tablet(ownership_file):
    """Whole-document tablet for the ownership sample."""
    return Tablet(str(ownership_file), (0, 17))


@pytest.fixture
def registry_dir(tmp_path):
    """A directory holding the sample tablets."""
    directory = tmp_path / "registry"
    directory.mkdir()
    write_registry_dir(directory)
    return directory


@pytest.fixture
def registry(registry_dir):
    """A registry over the sample directory."""
    return Registry.from_directory(registry_dir)
