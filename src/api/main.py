"""FastAPI application with the GraphQL endpoint for the library API."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from api.context import build_context_getter
from api.schema import schema
from common.constants import APP_NAME, APP_VERSION, GRAPHQL_PATH
from common.env import env
from store import LibraryStore, get_store


def create_app(store: LibraryStore | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Store backing the resolvers. If None, the process-wide store
               from get_store() is used.

    Returns:
        Configured FastAPI app with the GraphQL router mounted
    """
    if store is None:
        store = get_store()

    app = FastAPI(
        title=APP_NAME,
        description="GraphQL API for authors and their books",
        version=APP_VERSION,
    )

    # Enable CORS for frontend development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=env.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # GraphQL endpoint
    graphql_app = GraphQLRouter(
        schema,
        context_getter=build_context_getter(store),
        graphql_ide="graphiql" if env.graphiql_enabled() else None,
    )
    app.include_router(graphql_app, prefix=GRAPHQL_PATH)

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": APP_NAME,
            "version": APP_VERSION,
            "graphql_endpoint": GRAPHQL_PATH,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
