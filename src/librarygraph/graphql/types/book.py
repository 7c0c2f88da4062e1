"""
Book GraphQL type definitions
"""

import strawberry

from ...catalog.models import BookRecord
from .author import Author


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    record: strawberry.Private[BookRecord]

    @strawberry.field
    def title(self) -> str:
        """Get the title of this book."""
        from ..resolvers.book import resolve_book_title

        return resolve_book_title(self)

    @strawberry.field
    def author(self) -> Author:
        """Get the author of this book."""
        from ..resolvers.book import resolve_book_author

        return resolve_book_author(self)
