from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...catalog.search import search_book
from ...logging import get_logger
from ..context import get_catalog_from_info

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


# Query resolvers
def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve the top-level books field: every book, unfiltered."""
    from ..types.book import Book as BookType

    records = search_book(get_catalog_from_info(info))
    logger.debug("Resolved books", count=len(records))
    return [BookType(record=record) for record in records]


# Field resolvers
def resolve_book_title(book: Book) -> str:
    return book.record.title


def resolve_book_author(book: Book) -> Author:
    """
    Resolve the author of a book.

    Books store the author as a plain name, but the field is typed as an
    Author object, so wrap the name.
    """
    from ..types.author import Author as AuthorType

    return AuthorType(author_name=book.record.author)


def resolve_author_name(author: Author) -> str:
    return author.author_name
