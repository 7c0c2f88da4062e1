from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...catalog.search import search_book, search_libraries
from ...logging import get_logger
from ..context import get_catalog_from_info

if TYPE_CHECKING:
    from ..types.book import Book
    from ..types.library import Library

logger = get_logger(__name__)


# Query resolvers
def resolve_libraries(info: strawberry.Info) -> list[Library]:
    """Resolve the top-level libraries field. Takes no arguments."""
    from ..types.library import Library as LibraryType

    records = search_libraries(get_catalog_from_info(info))
    logger.debug("Resolved libraries", count=len(records))
    return [LibraryType(record=record) for record in records]


# Field resolvers
def resolve_library_branch(library: Library) -> str:
    return library.record.branch


def resolve_library_books(library: Library, info: strawberry.Info) -> list[Book]:
    """
    Resolve the books stocked at a library.

    Filters the catalog by the parent library's branch; a branch with no
    books yields an empty list.
    """
    from ..types.book import Book as BookType

    branch = library.record.branch
    records = search_book(get_catalog_from_info(info), branch)
    logger.debug("Resolved library books", branch=branch, count=len(records))
    return [BookType(record=record) for record in records]
