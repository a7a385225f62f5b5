"""In-memory data store for authors and books.

Example:
    >>> from store import create_store
    >>>
    >>> store = create_store()
    >>> store.find_author(1).name
    'J. K. Rowling'
    >>> [b.id for b in store.books_by_author(3)]
    [7, 8]
"""

from .factory import create_store, get_store
from .memory import LibraryStore
from .seed import SEED_AUTHORS, SEED_BOOKS
from .types import (
    AuthorRecord,
    BookRecord,
    IdStrategy,
    LibraryError,
    NotFoundError,
)

__all__ = [
    # Factory
    "create_store",
    "get_store",
    # Store
    "LibraryStore",
    # Fixture
    "SEED_AUTHORS",
    "SEED_BOOKS",
    # Types and exceptions
    "AuthorRecord",
    "BookRecord",
    "IdStrategy",
    "LibraryError",
    "NotFoundError",
]
