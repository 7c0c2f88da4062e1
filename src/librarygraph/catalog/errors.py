"""Catalog exceptions."""


class CatalogError(Exception):
    """Base exception for catalog operations."""

    pass


class CatalogDataError(CatalogError):
    """Raised when catalog data cannot be loaded or is malformed."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
