"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from src.models.content import Book, Page
from src.utils.store import ContentStore

ARABIC_TITLE = "كتاب الرجال من المريخ والنساء من الزهرة"


@pytest.fixture(autouse=True)
def reset_loguru() -> Iterator[None]:
    """Drop loguru sinks so tests never write to stale streams or log files."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def fixed_suffix() -> int:
    """Deterministic fallback suffix."""
    return 1700000000000


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Create a temporary data directory for tests."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def content_store(data_dir: Path) -> ContentStore:
    """Content store backed by a temporary directory."""
    return ContentStore(data_dir=data_dir)


@pytest.fixture
def sample_books() -> list[Book]:
    """Books in the states left behind by the old slug generator."""
    return [
        Book(id=1, title="Hello World", slug=None, author="Jane Doe"),
        Book(id=2, title=ARABIC_TITLE, slug="------", author="جون غراي"),
        Book(id=3, title="Existing Book", slug="existing-book"),
        Book(id=4, title="!!!???", slug=None),
        Book(id=5, title="Hello World", slug=""),
    ]


@pytest.fixture
def sample_pages() -> list[Page]:
    """Static pages."""
    return [
        Page(id=1, title="About", slug="about", content="We review books so you don't have to."),
        Page(id=2, title="Privacy Policy", slug="privacy-policy", content=None),
    ]
