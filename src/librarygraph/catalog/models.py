"""Catalog value objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LibraryRecord:
    """A library branch. Its books are derived by matching ``branch``."""

    branch: str


@dataclass(frozen=True)
class BookRecord:
    """A book held at exactly one branch.

    ``author`` is the author's plain name; the GraphQL layer exposes it as a
    nested Author object.
    """

    title: str
    author: str
    branch: str
