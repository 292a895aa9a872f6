"""
Shared fixtures for the twin finder tests.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from catalog.store import CatalogStore
from tests.helpers import build_test_record

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def make_record():
    """Factory fixture for records."""
    return build_test_record


@pytest.fixture
def make_catalog():
    """Factory fixture: records -> CatalogStore."""
    def _make(*records):
        return CatalogStore(records)
    return _make


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR
