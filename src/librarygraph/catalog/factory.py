"""Factory for the process-wide catalog repository."""

import json
from pathlib import Path
from typing import Any

from ..logging import get_logger
from .errors import CatalogDataError
from .models import BookRecord, LibraryRecord
from .repository import CatalogRepository, InMemoryCatalogRepository

logger = get_logger(__name__)

# Built once on first access and shared by every request
_repository: CatalogRepository | None = None


def _require_str(entry: dict[str, Any], key: str, where: str, source: str) -> str:
    value = entry.get(key)
    if not isinstance(value, str):
        raise CatalogDataError(f"{where}: '{key}' must be a string", source=source)
    return value


def load_catalog_fixture(path: Path) -> InMemoryCatalogRepository:
    """Load a catalog from a JSON fixture file.

    The file holds a ``libraries`` array of ``{"branch"}`` objects and a
    ``books`` array of ``{"title", "author", "branch"}`` objects. Array order
    is kept as the definition order.

    Raises:
        CatalogDataError: If the file cannot be read or does not match that shape
    """
    source = str(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogDataError(f"cannot read fixture: {e}", source=source) from e
    except json.JSONDecodeError as e:
        raise CatalogDataError(f"invalid JSON: {e}", source=source) from e

    if not isinstance(data, dict):
        raise CatalogDataError("fixture root must be an object", source=source)

    raw_libraries = data.get("libraries")
    raw_books = data.get("books")
    if not isinstance(raw_libraries, list) or not isinstance(raw_books, list):
        raise CatalogDataError("'libraries' and 'books' must be arrays", source=source)

    libraries: list[LibraryRecord] = []
    for index, entry in enumerate(raw_libraries):
        where = f"libraries[{index}]"
        if not isinstance(entry, dict):
            raise CatalogDataError(f"{where} must be an object", source=source)
        libraries.append(LibraryRecord(branch=_require_str(entry, "branch", where, source)))

    books: list[BookRecord] = []
    for index, entry in enumerate(raw_books):
        where = f"books[{index}]"
        if not isinstance(entry, dict):
            raise CatalogDataError(f"{where} must be an object", source=source)
        books.append(
            BookRecord(
                title=_require_str(entry, "title", where, source),
                author=_require_str(entry, "author", where, source),
                branch=_require_str(entry, "branch", where, source),
            )
        )

    return InMemoryCatalogRepository(libraries=libraries, books=books)


def create_catalog_repository(fixture_path: str | Path | None = None) -> CatalogRepository:
    """Create a repository from a fixture file, or from the built-in seed data."""
    if fixture_path:
        repository = load_catalog_fixture(Path(fixture_path))
        logger.info("Loaded catalog fixture", path=str(fixture_path), repository=repr(repository))
        return repository

    return InMemoryCatalogRepository()


def get_catalog_repository() -> CatalogRepository:
    """Get the process-wide catalog repository.

    Built from ``settings.catalog_fixture_path`` on first access; later calls
    return the same instance.
    """
    global _repository

    if _repository is None:
        from ..config import settings

        _repository = create_catalog_repository(settings.catalog_fixture_path)
        logger.debug("Catalog repository initialized", repository=repr(_repository))

    return _repository


def reset_catalog_repository() -> None:
    """Drop the process-wide repository so the next access rebuilds it."""
    global _repository
    _repository = None
