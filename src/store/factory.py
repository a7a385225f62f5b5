"""Factory for the process-wide store and isolated store instances."""

from common.env import env

from .memory import LibraryStore
from .types import IdStrategy

_default_store: LibraryStore | None = None


def create_store(id_strategy: IdStrategy | str | None = None) -> LibraryStore:
    """Create a new seeded store.

    Args:
        id_strategy: Id assignment strategy. If None, uses ID_STRATEGY from
                     the environment.

    Returns:
        A freshly seeded LibraryStore
    """
    if id_strategy is None:
        id_strategy = env.id_strategy()
    return LibraryStore.seeded(id_strategy=id_strategy)


def get_store() -> LibraryStore:
    """Get the store shared by the running process.

    The store is created and seeded on first access and lives for the rest
    of the process.
    """
    global _default_store
    if _default_store is None:
        _default_store = create_store()
    return _default_store
