"""
Tests for catalog repositories and value objects
"""

import dataclasses

import pytest

from librarygraph.catalog.models import BookRecord, LibraryRecord
from librarygraph.catalog.repository import CatalogRepository, InMemoryCatalogRepository
from librarygraph.catalog.seed_data import DEFAULT_BOOKS, DEFAULT_LIBRARIES


def test_repository_is_abstract():
    with pytest.raises(TypeError):
        CatalogRepository()  # type: ignore[abstract]


def test_default_repository_uses_seed_data():
    repository = InMemoryCatalogRepository()

    assert repository.list_libraries() == DEFAULT_LIBRARIES
    assert repository.list_books() == DEFAULT_BOOKS


def test_seed_data_contents():
    assert [library.branch for library in DEFAULT_LIBRARIES] == ["downtown", "riverside"]
    assert DEFAULT_BOOKS == (
        BookRecord(title="The Awakening", author="Kate Chopin", branch="riverside"),
        BookRecord(title="City of Glass", author="Paul Auster", branch="downtown"),
    )


def test_custom_records_are_copied_into_tuples():
    libraries = [LibraryRecord(branch="north")]
    books = [BookRecord(title="Ulysses", author="James Joyce", branch="north")]

    repository = InMemoryCatalogRepository(libraries=libraries, books=books)
    libraries.append(LibraryRecord(branch="south"))
    books.clear()

    assert repository.list_libraries() == (LibraryRecord(branch="north"),)
    assert repository.list_books() == (
        BookRecord(title="Ulysses", author="James Joyce", branch="north"),
    )


def test_partial_override_keeps_other_defaults():
    repository = InMemoryCatalogRepository(libraries=[LibraryRecord(branch="north")])

    assert repository.list_libraries() == (LibraryRecord(branch="north"),)
    assert repository.list_books() == DEFAULT_BOOKS


def test_empty_collections_are_allowed():
    repository = InMemoryCatalogRepository(libraries=[], books=[])

    assert repository.list_libraries() == ()
    assert repository.list_books() == ()


def test_records_are_immutable():
    book = DEFAULT_BOOKS[0]

    with pytest.raises(dataclasses.FrozenInstanceError):
        book.branch = "downtown"  # type: ignore[misc]


def test_repr_reports_sizes():
    assert repr(InMemoryCatalogRepository()) == "InMemoryCatalogRepository(libraries=2, books=2)"
