"""
Library GraphQL type definitions
"""

import strawberry

from ...catalog.models import LibraryRecord
from .book import Book


@strawberry.type
class Library:
    """Library branch type for GraphQL API."""

    record: strawberry.Private[LibraryRecord]

    @strawberry.field
    def branch(self) -> str:
        """Get the branch identifier of this library."""
        from ..resolvers.library import resolve_library_branch

        return resolve_library_branch(self)

    @strawberry.field
    def books(self, info: strawberry.Info) -> list[Book] | None:
        """Get the books stocked at this branch."""
        from ..resolvers.library import resolve_library_books

        return resolve_library_books(self, info)
