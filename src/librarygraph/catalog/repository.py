"""Read-only data access for the catalog."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from .models import BookRecord, LibraryRecord


class CatalogRepository(ABC):
    """Abstract source of library and book records.

    Implementations return sequences in a stable definition order and must not
    change them for the lifetime of the repository.
    """

    @abstractmethod
    def list_libraries(self) -> Sequence[LibraryRecord]:
        """Return all libraries in definition order."""
        pass

    @abstractmethod
    def list_books(self) -> Sequence[BookRecord]:
        """Return all books in definition order."""
        pass


class InMemoryCatalogRepository(CatalogRepository):
    """Catalog held in process memory as immutable tuples."""

    def __init__(
        self,
        libraries: Iterable[LibraryRecord] | None = None,
        books: Iterable[BookRecord] | None = None,
    ):
        if libraries is None or books is None:
            from .seed_data import DEFAULT_BOOKS, DEFAULT_LIBRARIES

            libraries = DEFAULT_LIBRARIES if libraries is None else libraries
            books = DEFAULT_BOOKS if books is None else books

        self._libraries = tuple(libraries)
        self._books = tuple(books)

    def list_libraries(self) -> tuple[LibraryRecord, ...]:
        return self._libraries

    def list_books(self) -> tuple[BookRecord, ...]:
        return self._books

    def __repr__(self) -> str:
        return (
            f"InMemoryCatalogRepository(libraries={len(self._libraries)}, "
            f"books={len(self._books)})"
        )
