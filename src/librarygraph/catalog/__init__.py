"""In-memory catalog of library branches and books."""

from .errors import CatalogDataError, CatalogError
from .factory import get_catalog_repository, reset_catalog_repository
from .models import BookRecord, LibraryRecord
from .repository import CatalogRepository, InMemoryCatalogRepository
from .search import search_book, search_libraries

__all__ = [
    "BookRecord",
    "CatalogDataError",
    "CatalogError",
    "CatalogRepository",
    "InMemoryCatalogRepository",
    "LibraryRecord",
    "get_catalog_repository",
    "reset_catalog_repository",
    "search_book",
    "search_libraries",
]
