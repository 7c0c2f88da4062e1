"""
GraphQL context helpers
"""

from typing import Any

import strawberry

from ..catalog.factory import get_catalog_repository
from ..catalog.repository import CatalogRepository

CATALOG_CONTEXT_KEY = "catalog"


def build_context(
    catalog: CatalogRepository | None = None, **extra: Any
) -> dict[str, Any]:
    """Build the context dict handed to resolvers."""
    return {CATALOG_CONTEXT_KEY: catalog or get_catalog_repository(), **extra}


def get_catalog_from_info(info: strawberry.Info) -> CatalogRepository:
    """
    Extract the catalog repository from a GraphQL info object.

    Falls back to the process-wide repository when the context carries none,
    e.g. when the schema is executed directly without a context.
    """
    context = info.context
    catalog = None
    if isinstance(context, dict):
        catalog = context.get(CATALOG_CONTEXT_KEY)
    elif context is not None:
        catalog = getattr(context, CATALOG_CONTEXT_KEY, None)

    if catalog is None:
        return get_catalog_repository()
    return catalog
