"""
Main FastAPI application for the librarygraph server
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..catalog.factory import get_catalog_repository
from ..catalog.repository import CatalogRepository
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    catalog: CatalogRepository = app.state.catalog
    logger.info(
        "Starting librarygraph API...",
        libraries=len(catalog.list_libraries()),
        books=len(catalog.list_books()),
        environment=settings.environment,
    )

    yield

    logger.info("Shutting down librarygraph API...")


def create_app(catalog: CatalogRepository | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        catalog: Repository to serve; defaults to the process-wide repository
    """
    if catalog is None:
        catalog = get_catalog_repository()

    app = FastAPI(
        title="librarygraph",
        description="GraphQL API over a catalog of library branches and books",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.catalog = catalog

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail fast: the server must not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    graphql_router = create_graphql_router(
        catalog, path=settings.graphql_path, graphiql=settings.graphiql
    )
    app.include_router(graphql_router, prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "librarygraph.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
