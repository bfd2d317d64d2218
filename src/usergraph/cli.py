#!/usr/bin/env python3
"""
Main CLI entry point for the usergraph server.
"""

import os
import sys

import click
import httpx
import uvicorn

from usergraph import __version__
from usergraph.config import settings
from usergraph.logging import configure_logging, get_logger
from usergraph.smoke import SmokeTestError, run_smoke

logger = get_logger(__name__)


def _http_client(timeout: float) -> httpx.Client:
    return httpx.Client(timeout=timeout)


@click.group()
@click.version_option(version=__version__, prog_name="usergraph")
def cli() -> None:
    """usergraph CLI - run and check the GraphQL server."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
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
    """Start the usergraph API server."""

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting usergraph API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app module reads these at import time
    if log_level == "debug":
        os.environ["USERGRAPH_DEBUG"] = "true"
        os.environ["USERGRAPH_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("USERGRAPH_DEBUG", "false")
        os.environ.setdefault("USERGRAPH_LOG_LEVEL", log_level)

    try:
        # One worker only: the store lives in process memory
        uvicorn.run(
            "usergraph.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--url",
    default=f"http://localhost:{settings.api_port}/graphql",
    show_default=True,
    help="GraphQL endpoint of a running server",
)
@click.option("--timeout", default=10.0, type=float, help="Request timeout in seconds")
def smoke(url: str, timeout: float) -> None:
    """Exercise every query and mutation against a running server."""
    click.echo(f"Checking GraphQL server at {url}...")

    try:
        with _http_client(timeout) as client:
            run_smoke(client, url, report=lambda line: click.echo(f"✓ {line}"))
    except httpx.HTTPError as e:
        click.echo(f"✗ Server is not reachable: {e}", err=True)
        sys.exit(1)
    except SmokeTestError as e:
        click.echo(f"✗ Smoke check failed: {e}", err=True)
        sys.exit(1)

    click.echo("All checks passed.")


if __name__ == "__main__":
    cli()
