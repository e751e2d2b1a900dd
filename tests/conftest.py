import sys
from datetime import datetime
from pathlib import Path

import pytest

# Make the src/ package importable without installing it.
SRC_ROOT = Path(__file__).resolve().parent.parent / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from review_filter.filters import Review  # noqa: E402
from review_filter.utils.config import reset_config  # noqa: E402


@pytest.fixture
def sample_reviews():
    return [
        Review('1', 'John Doe', 5, 'Excellent service!', '2023-12-01', 10),
        Review('2', 'Jane Smith', 3, 'Good but could be better', '2023-11-15', 5),
        Review('3', 'Bob Johnson', 4, 'Very good experience', '2023-10-20', 8),
        Review('4', 'Alice Brown', 2, 'Not satisfied', '2023-09-10', 2),
        Review('5', 'Charlie Wilson', 5, 'Amazing!', '2023-08-05', 15),
    ]


@pytest.fixture
def now():
    """Fixed reference moment shortly after the newest sample review."""
    return datetime(2023, 12, 10, 12, 0, 0)


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    monkeypatch.delenv("FILTERS_DEFAULT_SORT", raising=False)
    reset_config()
    yield
    reset_config()
