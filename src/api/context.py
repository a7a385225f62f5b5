"""Request context wiring the store into GraphQL resolvers."""

from collections.abc import Awaitable, Callable
from typing import Any

from strawberry.types import Info

from store import LibraryStore


def build_context_getter(store: LibraryStore) -> Callable[[], Awaitable[dict[str, Any]]]:
    """Create a GraphQLRouter context getter that exposes ``store``.

    Strawberry merges the returned dict with the request and response
    objects, so resolvers read the store from ``info.context["store"]``.
    """

    async def get_context() -> dict[str, Any]:
        return {"store": store}

    return get_context


def get_store_from_info(info: Info) -> LibraryStore:
    """Fetch the store for the current request."""
    return info.context["store"]
