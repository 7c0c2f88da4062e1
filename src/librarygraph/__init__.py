"""
librarygraph
GraphQL server for an in-memory catalog of library branches and books
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
