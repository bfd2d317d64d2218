"""
Main FastAPI application for the usergraph service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import UserStore, create_store

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting usergraph API...",
        environment=settings.environment,
        users=len(app.state.store),
    )

    yield

    logger.info("Shutting down usergraph API...")


def create_app(store: UserStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: User store to serve; a new one (seeded per settings) when omitted
    """
    app = FastAPI(
        title="usergraph API",
        description="GraphQL API for user records held in memory",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.store = store if store is not None else create_store(seed=settings.seed_users)

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "users": len(app.state.store),
        }

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(graphiql=settings.graphiql), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    if settings.graphiql:

        @app.get("/", include_in_schema=False)
        async def graphiql_redirect():  # pyright: ignore [reportUnusedFunction]
            """Send browsers to the GraphiQL IDE."""
            return RedirectResponse(url="/graphql")

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "usergraph.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
