import sys
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from class_stripper.cleaner.domain.statistics import CleaningStatistics  # noqa: E402


@pytest.fixture
def parse():
    """Parse a fragment the way the cleaner's adapter does."""

    def _parse(html):
        return BeautifulSoup(html, "html.parser", multi_valued_attributes=None)

    return _parse


@pytest.fixture
def stats():
    return CleaningStatistics()


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "tests/integration/" in str(item.fspath).replace("\\", "/"):
            item.add_marker(pytest.mark.integration)
