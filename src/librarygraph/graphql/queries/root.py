"""
Root GraphQL query definitions
"""

import strawberry

from ..types.book import Book
from ..types.library import Library


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def libraries(self, info: strawberry.Info) -> list[Library | None] | None:
        """Get every library branch."""
        from ..resolvers.library import resolve_libraries

        return resolve_libraries(info)

    @strawberry.field
    def books(self, info: strawberry.Info) -> list[Book | None] | None:
        """Get every book across all branches."""
        from ..resolvers.book import resolve_books

        return resolve_books(info)
