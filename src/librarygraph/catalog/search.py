"""Catalog queries used by the GraphQL resolvers."""

from .models import BookRecord, LibraryRecord
from .repository import CatalogRepository


def search_book(repository: CatalogRepository, branch: str | None = None) -> list[BookRecord]:
    """Return the books stocked at ``branch``, in definition order.

    Without a branch (None or empty) every book is returned. An unknown branch
    yields an empty list.
    """
    books = repository.list_books()
    if branch:
        return [book for book in books if book.branch == branch]
    return list(books)


def search_libraries(repository: CatalogRepository) -> list[LibraryRecord]:
    """Return every library, in definition order."""
    return list(repository.list_libraries())
