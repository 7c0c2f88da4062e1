#!/usr/bin/env python3
"""
Main CLI entry point for the librarygraph server.
"""

import json
import os
import sys

import click
import uvicorn

from librarygraph import __version__
from librarygraph.config import settings
from librarygraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="librarygraph")
def cli() -> None:
    """librarygraph CLI - serve and query the library catalog."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the GraphQL API server."""

    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    # The app module reads these at import time, including under --reload
    if log_level == "debug":
        os.environ["LIBRARYGRAPH_DEBUG"] = "true"
    else:
        os.environ.setdefault("LIBRARYGRAPH_DEBUG", "false")
    os.environ["LIBRARYGRAPH_LOG_LEVEL"] = log_level

    display_host = "localhost" if host in ("0.0.0.0", "::") else host
    logger.info(
        "Starting server",
        url=f"http://{display_host}:{port}{settings.graphql_path}",
        reload=reload,
        log_level=log_level,
    )

    try:
        if reload:
            uvicorn.run(
                "librarygraph.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
            )
        else:
            from librarygraph.api.app import app

            uvicorn.run(app, host=host, port=port, log_level=log_level)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.argument("document")
@click.option(
    "--fixture",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Catalog fixture JSON to query instead of the configured catalog",
)
def query(document: str, fixture: str | None) -> None:
    """Execute a GraphQL DOCUMENT against the catalog and print the JSON result."""
    from librarygraph.catalog.errors import CatalogDataError
    from librarygraph.catalog.factory import create_catalog_repository, get_catalog_repository
    from librarygraph.graphql.context import build_context
    from librarygraph.graphql.schema import schema

    # stdout carries only the JSON result
    configure_logging(log_level="warning", stream=sys.stderr)

    try:
        catalog = create_catalog_repository(fixture) if fixture else get_catalog_repository()
    except CatalogDataError as e:
        click.echo(f"✗ Error loading catalog: {e}", err=True)
        sys.exit(1)

    result = schema.execute_sync(document, context_value=build_context(catalog))

    payload: dict = {"data": result.data}
    if result.errors:
        payload["errors"] = [error.formatted for error in result.errors]

    click.echo(json.dumps(payload, indent=2))

    if result.errors:
        sys.exit(1)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
