"""
Author GraphQL type definitions
"""

import strawberry


@strawberry.type
class Author:
    """Author type for GraphQL API.

    Authors are not stored; each instance wraps the flat author name of the
    book it was built from.
    """

    author_name: strawberry.Private[str]

    @strawberry.field
    def name(self) -> str:
        """Get the author's name."""
        from ..resolvers.book import resolve_author_name

        return resolve_author_name(self)
