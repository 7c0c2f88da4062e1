"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from librarygraph.catalog.factory import reset_catalog_repository
from librarygraph.catalog.models import BookRecord, LibraryRecord
from librarygraph.catalog.repository import InMemoryCatalogRepository


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_catalog() -> Generator[None, None, None]:
    """Drop the process-wide catalog repository around each test."""
    reset_catalog_repository()
    yield
    reset_catalog_repository()


@pytest.fixture
def catalog() -> InMemoryCatalogRepository:
    """The built-in catalog: two libraries, two books."""
    return InMemoryCatalogRepository()


@pytest.fixture
def larger_catalog() -> InMemoryCatalogRepository:
    """A catalog with several books per branch and an empty branch."""
    return InMemoryCatalogRepository(
        libraries=[
            LibraryRecord(branch="downtown"),
            LibraryRecord(branch="riverside"),
            LibraryRecord(branch="hillcrest"),
        ],
        books=[
            BookRecord(title="The Awakening", author="Kate Chopin", branch="riverside"),
            BookRecord(title="City of Glass", author="Paul Auster", branch="downtown"),
            BookRecord(title="Ghosts", author="Paul Auster", branch="downtown"),
            BookRecord(title="The Storm", author="Kate Chopin", branch="riverside"),
            BookRecord(title="The Locked Room", author="Paul Auster", branch="downtown"),
        ],
    )


@pytest.fixture
def mock_info(catalog: InMemoryCatalogRepository) -> Any:
    """Create a mock GraphQL info object carrying the catalog in its context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"catalog": catalog}
    return info


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
